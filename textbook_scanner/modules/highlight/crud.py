"""CRUD operations for highlight entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import Highlight

highlight_crud: FastCRUD = FastCRUD(Highlight)
