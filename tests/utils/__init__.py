"""
Test utilities package for locize-sync tests.

## Available Modules

### fakes.py
In-memory stand-ins for the engine's collaborators:
- `FakeStore`: translation store recording every write, with per-language failures
- `ScriptedResolver`: resolver answering from a ``(language, key) -> value`` table
- `StaticKeySource`: key source returning a fixed key list
- `make_languages()`: ordered Language mapping from ``code -> name`` pairs
"""
