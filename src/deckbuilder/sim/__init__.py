"""Combat simulation: state, mechanics, card resolution, enemy AI and the engine."""
