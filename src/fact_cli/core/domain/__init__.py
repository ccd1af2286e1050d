"""Modelos y datos del dominio.

Por qué:
- Aquí viven las estructuras puras (categorías, tablas de hechos).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
