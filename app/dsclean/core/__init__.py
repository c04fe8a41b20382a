"""Core support modules: paths, settings and theming."""
