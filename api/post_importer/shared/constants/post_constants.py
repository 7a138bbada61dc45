"""
Constantes del dominio de posts.
Limites de longitud compartidos por el modelo ORM, la entidad y los endpoints.
"""

TITLE_MAX_LENGTH = 200
BODY_MAX_LENGTH = 4000
KEYWORD_MAX_LENGTH = 100

# Ruta de la coleccion completa en la fuente externa
POSTS_SOURCE_PATH = "/posts"
