"""JSON API and narrative layer over the experiment entry points."""
