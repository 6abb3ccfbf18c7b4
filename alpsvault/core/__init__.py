"""Core components: persistent store, repositories, enrichment clients, date parsing."""
