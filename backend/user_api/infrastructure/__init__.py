"""Infrastructure Layer — database access, logging, and other IO adapters."""
