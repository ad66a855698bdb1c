"""Sidebar labels for the RAG reference docs."""

from agent_network.models.navigation import NavigationTable

RAG_REFERENCE_NAV = NavigationTable([
    ("document", "MDocument"),
    ("chunk", ".chunk()"),
    ("embeddings", ".embed()"),
    ("extract-params", "ExtractParams"),
    ("rerank", "rerank()"),
    ("rerankWithScorer", "rerankWithScorer()"),
    ("metadata-filters", "Metadata Filters"),
    ("database-config", "DatabaseConfig"),
    ("graph-rag", "GraphRAG"),
    # vector stores
    ("astra", "AstraVector"),
    ("chroma", "ChromaVector"),
    ("vectorize", "CloudflareVector"),
    ("pg", "PgVector"),
    ("libsql", "LibSQLVector"),
    ("mongodb", "MongoDBVector"),
    ("couchbase", "CouchbaseVector"),
    ("opensearch", "OpenSearchVector"),
    ("pinecone", "PineconeVector"),
    ("qdrant", "QdrantVector"),
    ("turbopuffer", "TurboPuffer"),
    ("upstash", "UpstashVector"),
    ("lance", "LanceVector"),
])
