"""
공용 DB 베이스/세션 팩토리.
Base, Database 정의는 forum.db.session 한 곳에서 관리한다.
"""
from forum.db.session import Base, Database, build_engine

__all__ = ["Base", "Database", "build_engine"]
