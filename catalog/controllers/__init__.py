from catalog.controllers.author_controller import AuthorController

__all__ = ["AuthorController"]
