"""Bundled locale records, one `<code>.json` file per locale."""
