from backend.engine.gamegenerator.generator import GameGenerator, make_rng

__all__ = ["GameGenerator", "make_rng"]
