"""Legal document rendering: form answers in, paginated PDFs out."""
