# shop/api/__init__.py
