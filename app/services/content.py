"""
内容查询: 文章、分类、标签、评论

排行类查询的排序规则在这里定义, 调用方只决定数量。
"""
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from app.models.article import Article, Category, Tag, category_tags, article_tags
from app.models.comment import Comment


def get_article_by_path(db: Session, blog_id: int, path: str) -> Optional[Article]:
    if not path:
        return None
    return db.query(Article).filter(Article.blog_id == blog_id, Article.path == path).first()


def increment_view_count(db: Session, article: Article) -> None:
    article.view_count = (article.view_count or 0) + 1
    db.commit()


def get_most_view_articles(db: Session, size: int, blog_id: int) -> List[Article]:
    return (
        db.query(Article)
        .options(joinedload(Article.author))
        .filter(Article.blog_id == blog_id)
        .order_by(Article.view_count.desc(), Article.id.desc())
        .limit(size)
        .all()
    )


def get_most_comment_articles(db: Session, size: int, blog_id: int) -> List[Article]:
    return (
        db.query(Article)
        .options(joinedload(Article.author))
        .filter(Article.blog_id == blog_id)
        .order_by(Article.comment_count.desc(), Article.id.desc())
        .limit(size)
        .all()
    )


def _paginate(query, page: int, size: int) -> Tuple[List[Article], int]:
    total = query.count()
    articles = query.order_by(Article.created_at.desc(), Article.id.desc()) \
        .offset((page - 1) * size).limit(size).all()
    return articles, total


def get_articles(db: Session, page: int, size: int, blog_id: int) -> Tuple[List[Article], int]:
    query = db.query(Article).filter(Article.blog_id == blog_id)
    return _paginate(query, page, size)


def get_tag_articles(db: Session, tag_id: int, page: int, size: int, blog_id: int) -> Tuple[List[Article], int]:
    query = (
        db.query(Article)
        .join(article_tags, article_tags.c.article_id == Article.id)
        .filter(Article.blog_id == blog_id, article_tags.c.tag_id == tag_id)
    )
    return _paginate(query, page, size)


def get_category_articles(db: Session, category_id: int, page: int, size: int,
                          blog_id: int) -> Tuple[List[Article], int]:
    tag_ids = select(category_tags.c.tag_id).where(category_tags.c.category_id == category_id)
    query = (
        db.query(Article)
        .filter(
            Article.blog_id == blog_id,
            Article.tags.any(Tag.id.in_(tag_ids))
        )
    )
    return _paginate(query, page, size)


def get_categories(db: Session, size: int, blog_id: int) -> List[Category]:
    return (
        db.query(Category)
        .filter(Category.blog_id == blog_id)
        .order_by(Category.number, Category.id)
        .limit(size)
        .all()
    )


def get_category_by_title(db: Session, title: str, blog_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.blog_id == blog_id, Category.title == title).first()


def get_tags(db: Session, size: int, blog_id: int) -> List[Tag]:
    return (
        db.query(Tag)
        .filter(Tag.blog_id == blog_id)
        .order_by(Tag.article_count.desc(), Tag.id)
        .limit(size)
        .all()
    )


def get_tag_by_title(db: Session, title: str, blog_id: int) -> Optional[Tag]:
    return db.query(Tag).filter(Tag.blog_id == blog_id, Tag.title == title).first()


def get_recent_comments(db: Session, size: int, blog_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.blog_id == blog_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .limit(size)
        .all()
    )
