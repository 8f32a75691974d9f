"""Conector reCAPTCHA — verificação de presença humana.

Único ponto de IO com o serviço de verificação anti-abuso.
"""

from .client import RecaptchaClient, create_recaptcha_client

__all__ = [
    "RecaptchaClient",
    "create_recaptcha_client",
]
