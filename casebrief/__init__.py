"""Legal document analysis: upload, AI extraction, typed report."""
