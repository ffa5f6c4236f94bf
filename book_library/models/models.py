from sqlalchemy import Column, Integer, String

from book_library.core.database import Base


class Book(Base):
    __tablename__ = "books"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    author = Column(String, nullable=False, index=True)
    total_copies = Column(Integer, nullable=False, default=0)
    borrowed_copies = Column(Integer, nullable=False, default=0)
    # bumped by the ORM on every UPDATE; a stale write matches no row
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return (
            f"Book(id={self.id!r}, title={self.title!r}, "
            f"total_copies={self.total_copies!r}, borrowed_copies={self.borrowed_copies!r})"
        )
