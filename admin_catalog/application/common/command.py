"""
Command base class.

Commands represent intentions to change the system state.
They are named in imperative form: CreateCategory, UpdateGenre, etc.

Example:
    @dataclass(frozen=True)
    class CreateCategoryCommand(Command):
        name: str | None
        description: str | None
        is_active: bool
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (CreateCategory, not CategoryCreation)
    - Carry all data needed to execute the operation
    - Represent intentions, not facts

    Field rules are not checked at the API boundary: the domain validates
    them so every violation is reported together.
    """
