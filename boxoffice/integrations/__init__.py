"""
External movie metadata integrations (OMDB, TMDB).

Raw HTTP clients live under this namespace; normalization into lookup results
happens in `boxoffice.lookup`.
"""
