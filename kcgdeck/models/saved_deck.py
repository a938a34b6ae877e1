from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SavedDeck:
    """
    A named deck as the user saved it.

    Attributes:
        name: User-chosen deck name, unique
        code: Deck code (KCG or slash form)
    """

    name: str
    code: str
