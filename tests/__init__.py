"""INKPOST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : The same behavior asserted against every repository backend.
- integration/  : Real databases (SQLite files, Postgres via Testcontainers).
- e2e/          : The ``inkpost`` CLI driven through click's CliRunner.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Suites are marked by folder (unit, contract, integration, e2e) in conftest.py.
"""
