"""
config_pipeline — railway-oriented configuration pipeline.

Loads a configuration source, validates it and processes it into a final
outcome. Each stage either succeeds or fails with one member of a closed
error taxonomy; the first failure short-circuits the rest and a single
exhaustive dispatcher reports how the run ended.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
