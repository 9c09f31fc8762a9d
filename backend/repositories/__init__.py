from .genres import GenresRepository
from .books import BooksRepository
from .bookinstances import BookInstancesRepository
from . import models

__all__ = ["GenresRepository", "BooksRepository", "BookInstancesRepository", "models"]
