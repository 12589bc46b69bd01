"""
Erreurs email_builder.

Le renderer et l'extracteur de variables ne lèvent jamais : seules les
opérations d'édition et la construction des blocs signalent une erreur.
"""


class EmailBuilderError(Exception):
    """Classe parente des erreurs du builder."""


class BlockNotFound(EmailBuilderError, LookupError):
    """Une opération d'édition vise un id ou un index absent du document."""


class UnknownBlockKind(EmailBuilderError, ValueError):
    """Type de bloc absent du registry."""
