# landing/api/__init__.py
