# landing/__init__.py
# Backend de la landing page: lista de espera y conteo
