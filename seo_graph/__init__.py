"""SEO topic cluster graph API."""
