"""Mensagens fixas devolvidas ao cliente pela API de contato.

Textos em francês (público do formulário). Nenhuma mensagem expõe
detalhes internos de provedores.
"""

from __future__ import annotations

from typing import Final

ROOT_MESSAGE: Final = "API de contact du portfolio - Service actif"

SEND_SUCCESS_MESSAGE: Final = "Message envoyé avec succès !"
RECAPTCHA_FAILED_MESSAGE: Final = "Échec de la vérification reCAPTCHA"
DISPATCH_FAILED_MESSAGE: Final = (
    "Erreur lors de l'envoi du message. Veuillez réessayer plus tard."
)

INVALID_BODY_MESSAGE: Final = "Corps de requête invalide"
NOT_FOUND_MESSAGE: Final = "Route non trouvée"
INTERNAL_ERROR_MESSAGE: Final = "Erreur interne du serveur"
BODY_TOO_LARGE_MESSAGE: Final = "Corps de requête trop volumineux"
