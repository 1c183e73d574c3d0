"""Testing helpers – in-memory fakes for every pipeline port."""
