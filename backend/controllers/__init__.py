"""
Controllers Package

This package contains controller classes that handle the catalog use cases.
Controllers sit between the API routes and the repositories: they validate
form input, query or mutate the database, and return a view result.
"""
from .base import Redirect, Render
from .genre_controller import GenreController
from .bookinstance_controller import BookInstanceController

__all__ = ["Redirect", "Render", "GenreController", "BookInstanceController"]
