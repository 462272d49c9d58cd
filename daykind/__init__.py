"""daykind - klassning av kalenderdagar (vardag, dag före helgdag, helgdag)."""

__version__ = "0.1.0"
