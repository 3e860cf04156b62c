"""
Flavorbase Backend: API Schemas
=================================

Response contracts, one module per resource family. Request bodies are not
modelled here: they are checked by the declared rules in app.validation.
"""
