"""
puml2model package – structural PlantUML → in-memory model.

Responsibilities are split the same way as the exporter it grew out of:
 - Line trimming/classification in lines.py
 - One regex matcher per line grammar in matchers/*
 - Registry/decorator for matcher lookup and priority in matcher_registry.py
 - Pure data models in models.py
 - Line-by-line state machine in parser.py
 - Inspection dump and PlantUML string builder in renderer.py
 - CLI wiring in cli.py, main orchestration in main.py
"""
from .models import (
    Attribute,
    Constraint,
    Entity,
    Method,
    Relationship,
    StructuralModel,
)
from .parser import ModelInputError, Parser, parse, parse_file

__all__ = [
    "Attribute",
    "Constraint",
    "Entity",
    "Method",
    "ModelInputError",
    "Parser",
    "Relationship",
    "StructuralModel",
    "parse",
    "parse_file",
]
