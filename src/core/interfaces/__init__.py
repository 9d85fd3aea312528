"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El cliente HTTP depende de `TokenStore`, no de un archivo ni de estado global.
"""
