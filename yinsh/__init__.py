"""Moteur de règles et interface pygame pour Yinsh (deux joueurs)."""
