"""Person Registry: CRUD pages for person records."""
