"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las entidades Helix (Channel, Followed, Follower), el envelope
  genérico y las respuestas tipadas (Pydantic v2).
- El dominio no conoce httpx ni la CLI: solo la forma de los datos.
"""
