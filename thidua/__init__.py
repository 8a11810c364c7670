"""ThiDua - Classement et tendances de l'émulation entre classes."""
