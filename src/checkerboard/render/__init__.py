from checkerboard.render.ascii import CUBE, SQUARE, TEMPLATES, render, render_to_string
