"""UNO rule engine with human, random and LLM players."""

__version__ = "0.2.0"
