"""Infrastructure layer: third-party backed views of domain data."""
