"""Release tooling for Go modules and building blocks for a markdown code-block web app."""

__version__ = "2.0.0"