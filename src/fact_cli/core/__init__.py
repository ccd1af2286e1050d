"""Core de fact-cli.

Qué vive aquí:
- Dominio (categorías, tablas estáticas), contratos y servicios.
- Configuración y errores compartidos por CLI y adaptadores.
"""
