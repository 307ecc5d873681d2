"""
Eccezioni del service layer. I router le traducono in HTTPException:
NotFoundError -> 404, InvalidDataError -> 400, ConflictError -> 409.
"""


class NotFoundError(LookupError):
    """Riga richiesta inesistente (partita, giocatore, formazione, evento...)."""


class InvalidDataError(ValueError):
    """Payload non valido."""


class ConflictError(ValueError):
    """Operazione non ammessa nello stato corrente (fase partita, cambi esauriti)."""
