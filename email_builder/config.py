"""
Configuration: variables d'environnement.

Lues à chaque appel (et non à l'import) pour rester surchargeables en test :
  EMAIL_BUILDER_PLACEHOLDER_IMAGE → image de remplacement quand `url` est vide
  EMAIL_BUILDER_COMPANY           → nom de société des footers par défaut
  EMAIL_BUILDER_LOG_LEVEL         → niveau de log de l'app FastAPI
"""
import os

DEFAULT_PLACEHOLDER_IMAGE = "https://placehold.co/560x200/e2e8f0/64748b?text=Image"
DEFAULT_COMPANY = "Company"


def placeholder_image_url() -> str:
    return os.getenv("EMAIL_BUILDER_PLACEHOLDER_IMAGE") or DEFAULT_PLACEHOLDER_IMAGE


def company_name() -> str:
    return os.getenv("EMAIL_BUILDER_COMPANY") or DEFAULT_COMPANY


def log_level() -> str:
    return (os.getenv("EMAIL_BUILDER_LOG_LEVEL") or "INFO").upper()
