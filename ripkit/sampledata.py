"""Randomised sample markdown and HTML filler used when trying out page widgets."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from ripkit.navleft import NavFile, NavFolder

_FMT_FRANK = """
## Frank %d

### Fly me to the __moon__

Let me play among the _stars_
Let me see what spring is like
On _Jupiter_ and _Mars_
In other words, hold my hand
In other words, baby, kiss me

"""

_FMT_SUN_TZU = """
## Fake Sun Tzu %d

Hence, when we are able to attack, we must look like we're scanning tic-toc;
when using our forces, we must appear to be drowsy.

| x | y | z | planet |
|---|---|---|---------|
| a | b | c | jupiter |
| d | e | f | mars |
| g | h | i | venus |
| j | k | l | earth |

When we are near, we must make the enemy believe that we've gone out for coffee;
when far away, we must make him believe we are under the bed.

"""

_FMT_SPACE_SUIT = """
## Have Space Suit - Will Travel %d

Women and cats will do as they please;
men and dogs should relax and get used to the idea.

> There is no worse tyranny than to force a man to pay 
> for what he does not want merely because you think
> it would be good for him.

Always store beer in a dark place.

> ```
> let a = b**2 + c**2
> print math.sqrt(a)
> ```

This is the Unix philosophy: Write programs that do one thing and do it well.
Write programs to work together. Write programs to handle text streams,
because that is a universal interface.
"""

CODE_BLOCKS = (
    """
which ls
cat /etc/hosts
""",
    """
which cat
date
""",
    """
ls /etc | wc -l
echo Doug McIlroy, can you summarize what\\'s most important?
""",
    """
echo "Greetings, program!"
time
date
cat /etc/hosts | wc -c
cal
""",
)

LOREM_IPSUM = (
    """
Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor
incididunt ut labore et dolore magna aliqua.
""",
    """
Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut
aliquip ex ea commodo consequat.
""",
    """
Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu
fugiat nulla pariatur.
""",
    """
Excepteur sint occaecat cupidatat non proident,sunt in culpa qui officia
deserunt mollit anim id est laborum.
""",
)

ELEMENTS = tuple(
    """
Hydrogen Helium Lithium Beryllium Boron Carbon Nitrogen Oxygen Fluorine Neon
Sodium Magnesium Aluminium Silicon Phosphorus Sulfur Chlorine Argon Potassium
Calcium Scandium Titanium Vanadium Chromium Manganese Iron Cobalt Nickel Copper
Zinc Gallium Germanium Arsenic Selenium Bromine Krypton Rubidium Strontium
Yttrium Zirconium Niobium Molybdenum Technetium Ruthenium Rhodium Palladium
Silver Cadmium Indium Tin Antimony Tellurium Iodine Xenon Cesium Barium
Lanthanum Cerium Praseodymium Neodymium Promethium Samarium Europium Gadolinium
Terbium Dysprosium Holmium Erbium Thulium Ytterbium Lutetium Hafnium Tantalum
Tungsten Rhenium Osmium Iridium Platinum Gold Mercury Thallium Lead Bismuth
Polonium Astatine Radon Francium Radium Actinium Thorium Protactinium Uranium
Neptunium Plutonium Americium Curium Berkelium Californium Einsteinium Fermium
Mendelevium Nobelium Lawrencium Rutherfordium Dubnium Seaborgium Bohrium
Hassium Meitnerium Darmstadtium Roentgenium Copernicium Nihonium Flerovium
Moscovium Livermorium Tennessine Oganesson
""".split()
)


@dataclass
class _MarkdownFile(NavFile):
    """A navigable file that also carries its markdown content."""

    content: bytes = b""


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def _often(rng: random.Random) -> bool:
    """True three times out of four."""
    return rng.randrange(4) != 0


def _random_format(rng: random.Random) -> str:
    return (_FMT_FRANK, _FMT_SUN_TZU, _FMT_SPACE_SUIT)[rng.randrange(3)]


def _random_lorem_ipsum(rng: random.Random) -> str:
    return rng.choice(LOREM_IPSUM)[1:]


def _random_code_block(rng: random.Random) -> str:
    return rng.choice(CODE_BLOCKS)[1:]


def random_label(rng: Optional[random.Random] = None) -> str:
    """Return a label such as ``@Carbon042``."""
    rng = _rng(rng)
    element = ELEMENTS[rng.randrange(len(ELEMENTS))]
    return "@%s%03d" % (element, rng.randrange(999))


def md_bytes(doc_id: int, rng: Optional[random.Random] = None) -> bytes:
    """Return a random markdown document mentioning doc_id, with bash blocks."""
    rng = _rng(rng)
    fmt = _random_format(rng)
    parts = [f"# MD Doc {doc_id}"]
    for _ in range(1 + rng.randrange(10)):
        parts.append(fmt % doc_id)
        parts.append(_random_lorem_ipsum(rng))
        parts.append("\n")
        if _often(rng):
            parts.append("<!-- " + random_label(rng) + " @test -->\n")
        parts.append("```bash\n" + _random_code_block(rng) + "```\n")
        if not _often(rng):
            parts.append("\n```bash\n" + _random_code_block(rng) + "```\n")
        if not _often(rng):
            parts.append("\n<!-- @mississippi -->\n")
            parts.append("\n```bash\n" + _random_code_block(rng) + "```\n")
        parts.append(_random_lorem_ipsum(rng))
    return "".join(parts).encode("utf-8")


def filler_div(text: str) -> str:
    """Wrap text in a filler div."""
    return '<div class="filler"> ' + text + " </div>"


def lorem_ipsum(n: int) -> str:
    """Return n-1 rounds of every lorem ipsum paragraph, each in a <p>."""
    return "".join(
        "<p>" + line + "</p>" for _ in range(1, n) for line in LOREM_IPSUM
    )


def _file(number: int, rng: random.Random) -> _MarkdownFile:
    return _MarkdownFile(name=f"file{number:02d}.md", content=md_bytes(number, rng))


def make_named_folder_tree_of_markdown(
    top: NavFolder, rng: Optional[random.Random] = None
) -> NavFolder:
    """Fill top with a fixed tree of 17 markdown files in 6 sub-folders."""
    rng = _rng(rng)
    f = lambda n: _file(n, rng)  # noqa: E731
    return (
        top.add_file(f(0))
        .add_file(f(1))
        .add_file(f(2))
        .add_folder(
            NavFolder("dir0")
            .add_file(f(3))
            .add_file(f(4))
            .add_folder(NavFolder("dir1").add_file(f(5)).add_file(f(6)))
        )
        .add_folder(
            NavFolder("dir2")
            .add_file(f(7))
            .add_file(f(8))
            .add_file(f(9))
            .add_folder(
                NavFolder("dir3")
                .add_file(f(10))
                .add_file(f(11))
                .add_file(f(12))
                .add_folder(
                    NavFolder("dir4").add_file(f(13)).add_file(f(14)).add_file(f(15))
                )
            )
        )
        .add_folder(NavFolder("dir5").add_file(f(16)))
    )


def make_folder_tree_of_markdown(rng: Optional[random.Random] = None) -> NavFolder:
    """Return the sample markdown tree under a folder named ``top``."""
    return make_named_folder_tree_of_markdown(NavFolder("top"), rng)