"""
Blocs conteneurs — row2/row3 (cartes empilées) et column2/column3 (colonnes côte à côte).
`children` = liste de cellules, chaque cellule = liste de blocs (dicts bruts ou modèles).
"""
from typing import Any, List, Literal
from .base import BaseBlock


class ContainerBlock(BaseBlock):
    """Base commune des conteneurs récursifs."""
    children: List[List[Any]] = []


class Row2Block(ContainerBlock):
    type: Literal["row2"] = "row2"


class Row3Block(ContainerBlock):
    type: Literal["row3"] = "row3"


class Column2Block(ContainerBlock):
    type: Literal["column2"] = "column2"


class Column3Block(ContainerBlock):
    type: Literal["column3"] = "column3"
