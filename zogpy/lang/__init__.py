"""Built-in error message maps: English (en) and Spanish (es)."""