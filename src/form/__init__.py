"""Form selection state and submission validation."""
