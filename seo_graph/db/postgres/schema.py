"""DDL for the tables read by the SEO cluster service."""

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS topic_clusters (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        total_search_volume BIGINT,
        avg_difficulty NUMERIC,
        content_count INTEGER NOT NULL DEFAULT 0,
        keyword_count INTEGER NOT NULL DEFAULT 0
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS seo_entities (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        type TEXT NOT NULL,
        search_volume BIGINT,
        difficulty NUMERIC,
        intent TEXT,
        url TEXT,
        cpc NUMERIC,
        ranking_position INTEGER,
        traffic_potential BIGINT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS seo_relationships (
        id TEXT PRIMARY KEY,
        from_id TEXT NOT NULL,
        to_id TEXT NOT NULL,
        relationship_type TEXT NOT NULL,
        strength NUMERIC,
        description TEXT,
        similarity_score NUMERIC,
        link_count INTEGER,
        shared_keywords INTEGER
    );
    """,
    "CREATE INDEX IF NOT EXISTS seo_relationships_from_idx ON seo_relationships (from_id);",
    "CREATE INDEX IF NOT EXISTS seo_relationships_to_idx ON seo_relationships (to_id);",
    """
    CREATE TABLE IF NOT EXISTS keywords (
        id TEXT PRIMARY KEY,
        keyword TEXT NOT NULL,
        search_volume BIGINT,
        difficulty NUMERIC,
        intent TEXT,
        cpc NUMERIC
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS cluster_keywords (
        cluster_id TEXT NOT NULL,
        keyword_id TEXT NOT NULL,
        PRIMARY KEY (cluster_id, keyword_id)
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS content_gaps (
        id TEXT PRIMARY KEY,
        cluster_id TEXT NOT NULL,
        topic TEXT NOT NULL,
        search_volume BIGINT,
        difficulty NUMERIC,
        intent TEXT,
        traffic_potential BIGINT,
        priority TEXT NOT NULL DEFAULT 'medium'
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS competitors (
        id TEXT PRIMARY KEY,
        domain TEXT NOT NULL,
        url TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS competitor_keywords (
        competitor_id TEXT NOT NULL,
        keyword_id TEXT NOT NULL,
        ranking_position INTEGER,
        PRIMARY KEY (competitor_id, keyword_id)
    );
    """,
)

TABLES: tuple[str, ...] = (
    "topic_clusters",
    "seo_entities",
    "seo_relationships",
    "keywords",
    "cluster_keywords",
    "content_gaps",
    "competitors",
    "competitor_keywords",
)
