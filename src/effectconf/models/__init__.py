from effectconf.models.species import Species

__all__ = ["Species"]
