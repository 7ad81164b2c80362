"""
binlink Test Suite
==================

Test organization mirrors the source code structure:
    tests/
    ├── test_core/           → Tests for binlink.core (triple, config, models)
    ├── test_infrastructure/ → Tests for binlink.infrastructure (fs, loaders)
    ├── test_resolution/     → Tests for binlink.resolution (matching)
    ├── test_facade.py       → Tests for BinaryTarget
    └── conftest.py          → Shared pytest fixtures

Running Tests:
    pytest                          # Run all tests
    pytest tests/test_resolution/   # Run only resolution tests
    pytest --cov=binlink            # Run with coverage report
"""
