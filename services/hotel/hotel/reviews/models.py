from sqlalchemy import Column, SmallInteger, Text, DateTime, ForeignKey, Index, CheckConstraint

from hotel.database.engine import Base, BigIntPK, utcnow


class Review(Base):
    __tablename__ = "reviews"

    review_id = Column(BigIntPK, primary_key=True, autoincrement=True)
    user_id = Column(BigIntPK, ForeignKey("users.user_id"), nullable=True)
    room_id = Column(BigIntPK, ForeignKey("rooms.room_id"), nullable=True)
    rating = Column(SmallInteger, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
        Index("idx_reviews_created", created_at),
    )
