# Shared Common Library for the Flight Information Service
# Cross-cutting pieces: error envelope, request tracing, health checks,
# and API documentation. Import from the submodules directly;
# settings load some of them before the app registry is ready.

__version__ = "1.0.0"
