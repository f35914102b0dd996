"""Domain layer for doubleguard.

This layer contains:
- Value Objects: double kinds, classifications, permissiveness, failures
- Domain Services: the double classifier and the compatibility judge
- Exceptions: errors surfaced to test code
- Helpers: type expression accessors and the strict validator

The domain layer depends only on the standard library.
"""
