"""HTTP endpoint modules, one router per resource."""
