"""Configuration, item ID generation, project setup and editor launching for a Markdown task tracker."""

__version__ = "0.4.0"