"""Connectors — adapters de borda para APIs externas.

Estrutura:
- recaptcha/: verificação anti-abuso (Google reCAPTCHA siteverify)
- emailjs/: envio de e-mail transacional (EmailJS REST API)

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
