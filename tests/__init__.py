"""ROSTER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a SQLite database.
- functional/   : User-visible CLI flows tested at the boundary.
- e2e/          : CLI logging behavior across the whole process.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer recording fakes over mocks.
- Integration hits a real database with realistic setup/teardown.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
