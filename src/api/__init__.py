"""API — camada de borda do contact relay.

Responsabilidades:
- Receber requests HTTP (formulário de contato, status)
- Aplicar middlewares (CORS, headers de segurança, rate limit)
- Parsear e validar payloads
- Falar com APIs externas (reCAPTCHA, EmailJS)

Subpastas:
- connectors/: clientes HTTP por provedor
- middleware/: cortes transversais HTTP
- normalizers/: corpo HTTP → payload dict
- validators/: regras do formulário e limites
- routes/: endpoints HTTP

NÃO PODE conter: orquestração do pipeline de envio (fica em app/use_cases).
"""
