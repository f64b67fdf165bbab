"""Exercise course helpers: rust-project.json generation, status lines and worked solutions."""

__version__ = "5.4.1"