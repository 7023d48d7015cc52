"""HTTP endpoint receiving activities from a channel connector."""
