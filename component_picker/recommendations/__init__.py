"""
Recommendation engine: maps a message classification plus optional
refinement answers to scored, explained component recommendations.

Modules
-------
scorer   : FilterScore dataclass + score_candidate() + build_reason()
           — pure functions, no I/O.
engine   : RecommendationSet dataclass + recommend().
reporter : build_payload() + write_recommendation_json() + write_recommendation_csv()
           — JSON/CSV file output.
"""
