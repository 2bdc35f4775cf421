from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Table, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


# Many-to-many relationship table for articles and tags
article_tags = Table(
    "article_tags",
    Base.metadata,
    Column("article_id", Integer, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)
)


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("blog_id", "title", name="uq_category_blog_title"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(50), nullable=False)
    description = Column(String(255), default="")
    number = Column(Integer, default=0, comment="排序")
    blog_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    # 分类通过标签聚合文章
    tags = relationship("Tag", secondary="category_tags")


category_tags = Table(
    "category_tags",
    Base.metadata,
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True)
)


class Tag(Base):
    __tablename__ = "tags"
    __table_args__ = (UniqueConstraint("blog_id", "title", name="uq_tag_blog_title"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(50), nullable=False)
    article_count = Column(Integer, default=0)
    blog_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    articles = relationship("Article", secondary=article_tags, back_populates="tags")


class Article(Base):
    __tablename__ = "articles"
    __table_args__ = (UniqueConstraint("blog_id", "path", name="uq_article_blog_path"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    abstract = Column(String(500), default="")
    content = Column(Text, nullable=False)
    # 以 / 开头, 博客内唯一
    path = Column(String(255), nullable=False)

    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    blog_id = Column(Integer, nullable=False, index=True)

    # Stats
    view_count = Column(Integer, default=0)
    comment_count = Column(Integer, default=0)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    author = relationship("User")
    tags = relationship("Tag", secondary=article_tags, back_populates="articles")
    comments = relationship("Comment", back_populates="article", cascade="all, delete-orphan")
