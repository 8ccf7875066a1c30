"""Pure domain helpers: storage keys, roles, record projections."""
