"""planwright: phased web research and LLM synthesis into technical plans."""

__version__ = "0.1.0"
