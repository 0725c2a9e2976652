from groupie.relation.core import RelationRepository

__all__ = ["RelationRepository"]
