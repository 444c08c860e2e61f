"""Command groups for the upbank CLI: one Typer app per Up API resource."""
