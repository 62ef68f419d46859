"""SQL statements for the SEO analytics store.

Every statement takes its inputs as asyncpg ``$n`` bound parameters. Values
are never interpolated into the SQL text.
"""

LIST_CLUSTERS = """
    SELECT
        tc.id,
        tc.name,
        tc.total_search_volume AS search_volume,
        tc.avg_difficulty::float8 AS difficulty,
        'informational' AS intent,
        NULL::text AS url,
        (tc.content_count > 0 OR tc.keyword_count > 0) AS has_more
    FROM topic_clusters tc
    ORDER BY tc.total_search_volume DESC NULLS LAST, tc.id
    LIMIT $1
"""

GET_CLUSTER = """
    SELECT
        tc.id,
        tc.name,
        tc.total_search_volume AS search_volume,
        tc.avg_difficulty::float8 AS difficulty,
        'informational' AS intent,
        NULL::text AS url,
        (tc.content_count > 0 OR tc.keyword_count > 0) AS has_more
    FROM topic_clusters tc
    WHERE tc.id = $1
"""

# $1 cluster id, $2 relationship types, $3 entity types
NEIGHBORHOOD_ENTITIES = """
    SELECT
        e.id,
        e.name,
        e.type,
        e.search_volume,
        e.difficulty::float8 AS difficulty,
        e.intent,
        e.url,
        e.cpc::float8 AS cpc,
        e.ranking_position,
        e.traffic_potential,
        EXISTS (
            SELECT 1 FROM seo_relationships r2 WHERE r2.from_id = e.id
        ) AS has_more
    FROM seo_entities e
    WHERE e.type = ANY($3::text[])
      AND EXISTS (
        SELECT 1
        FROM seo_relationships r
        WHERE r.from_id = $1
          AND r.to_id = e.id
          AND r.relationship_type = ANY($2::text[])
      )
    ORDER BY e.search_volume DESC NULLS LAST, e.id
"""

CLUSTER_EDGES = """
    SELECT
        r.id,
        r.from_id,
        r.to_id,
        r.relationship_type,
        r.strength::float8 AS strength,
        r.description,
        COALESCE(r.similarity_score, 0)::float8 AS similarity_score,
        COALESCE(r.link_count, 0) AS link_count,
        COALESCE(r.shared_keywords, 0) AS shared_keywords
    FROM seo_relationships r
    WHERE r.from_id = $1 OR r.to_id = $1
    ORDER BY r.id
"""

CLUSTER_STATS = """
    SELECT
        tc.total_search_volume,
        tc.avg_difficulty::float8 AS avg_difficulty,
        tc.content_count,
        tc.keyword_count,
        (
            SELECT COUNT(DISTINCT comp.id)
            FROM seo_relationships r
            JOIN seo_entities comp ON comp.id = r.to_id AND comp.type = 'competitor'
            WHERE r.from_id = tc.id AND r.relationship_type = 'competitor_overlap'
        ) AS competitor_count,
        (
            SELECT COUNT(*) FROM content_gaps g WHERE g.cluster_id = tc.id
        ) AS gap_count
    FROM topic_clusters tc
    WHERE tc.id = $1
"""

# $1 cluster id, $2 max difficulty, $3 min search volume,
# $4 exclude keywords linked to any cluster, $5 limit
KEYWORD_OPPORTUNITIES = """
    SELECT
        k.id,
        k.keyword AS name,
        k.search_volume,
        k.difficulty::float8 AS difficulty,
        k.intent,
        k.cpc::float8 AS cpc
    FROM keywords k
    WHERE k.difficulty::float8 < $2::float8
      AND k.search_volume > $3
      AND NOT EXISTS (
        SELECT 1
        FROM cluster_keywords ck
        WHERE ck.keyword_id = k.id AND ($4::boolean OR ck.cluster_id = $1)
      )
      AND NOT EXISTS (
        SELECT 1
        FROM seo_relationships r
        WHERE r.to_id = k.id
          AND r.relationship_type = 'keyword_cluster'
          AND ($4::boolean OR r.from_id = $1)
      )
    ORDER BY k.search_volume DESC, k.difficulty ASC, k.id
    LIMIT $5
"""

# $1 cluster id, $2 priority
CONTENT_GAPS = """
    SELECT
        cg.id,
        cg.topic AS name,
        cg.search_volume,
        cg.difficulty::float8 AS difficulty,
        cg.intent,
        cg.traffic_potential
    FROM content_gaps cg
    WHERE cg.cluster_id = $1 AND cg.priority = $2
    ORDER BY cg.search_volume DESC NULLS LAST, cg.id
"""

# $1 cluster id, $2 minimum shared keywords
COMPETITOR_OVERLAP = """
    SELECT
        c.id,
        c.domain AS name,
        c.url,
        COUNT(DISTINCT ck.keyword_id) AS shared_keywords
    FROM competitors c
    JOIN competitor_keywords ck ON ck.competitor_id = c.id
    JOIN cluster_keywords clk ON clk.keyword_id = ck.keyword_id
    WHERE clk.cluster_id = $1
    GROUP BY c.id, c.domain, c.url
    HAVING COUNT(DISTINCT ck.keyword_id) >= $2
    ORDER BY shared_keywords DESC, c.id
"""

PING = "SELECT 1 AS ok"
