#!/usr/bin/env python3
"""
初始化博客脚本 (交互式输入)

使用方法:
    uv run python scripts/init_blog.py

    在任何输入提示符下，输入 'q' 或 'quit' 即可退出脚本。
"""

import sys
import os
import re

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.schemas.setting import SETTING_BASIC_BLOG_TITLE, SETTING_BASIC_BLOG_URL, SETTING_I18N_LOCALE
from app.services.init import BlogExistsError, init_blog
from app.i18n.messages import get_locales


# --- 核心逻辑 ---

def create_blog(username: str, nickname: str, blog_title: str, blog_url: str, locale: str) -> bool:
    """创建博客及其默认设置"""
    init_db()

    db = SessionLocal()
    try:
        overrides = {SETTING_I18N_LOCALE: locale}
        if blog_title:
            overrides[SETTING_BASIC_BLOG_TITLE] = blog_title
        if blog_url:
            overrides[SETTING_BASIC_BLOG_URL] = blog_url

        user = init_blog(db, username, nickname=nickname, overrides=overrides)

        print("\n" + "=" * 50)
        print("✅ 博客创建成功!")
        print(f"   用户名: {user.name}")
        print(f"   昵称: {user.nickname}")
        print(f"   博客 ID: {user.blog_id}")
        print(f"   访问地址: {blog_url or settings.SERVER_URL + settings.BLOG_PATH_PREFIX + '/' + user.name}")
        print("=" * 50 + "\n")
        return True
    except BlogExistsError as e:
        db.rollback()
        print(f"\n⚠️  {e}")
        return False
    finally:
        db.close()


# --- 校验函数 ---

def validate_username(username: str) -> bool:
    """用户名会出现在博客 URL 中, 只允许字母数字和 - _"""
    if not re.match(r"^[A-Za-z0-9_-]{2,32}$", username):
        print("🚨 用户名需为 2 到 32 位字母、数字、- 或 _。")
        return False
    return True


def validate_url(url: str) -> bool:
    if not re.match(r"^https?://\S+$", url):
        print("🚨 请输入以 http:// 或 https:// 开头的地址。")
        return False
    return True


def validate_locale(locale: str) -> bool:
    if locale not in get_locales():
        print(f"🚨 可选语言: {', '.join(get_locales())}")
        return False
    return True


def validate_yes_no(choice: str) -> bool:
    if choice not in ['y', 'n']:
        print("🚨 输入无效，请键入 'y' 或 'n'。")
        return False
    return True


def get_validated_input(prompt: str, validator, allow_empty: bool = False, optional_default: str = None):
    """
    读取一行输入直到通过校验, 输入 q/quit 退出脚本。

    :param allow_empty: 是否允许空输入, 为空时返回 optional_default。
    """
    while True:
        full_prompt = prompt
        if optional_default:
            full_prompt += f" [默认: {optional_default}]"
        full_prompt += " (q/quit 退出): "

        user_input = input(full_prompt).strip()

        if user_input.lower() in ['q', 'quit']:
            print("\n👋 退出脚本。")
            sys.exit(0)

        if not user_input:
            if allow_empty:
                return optional_default if optional_default is not None else user_input
            print("🚨 输入不能为空。请重新输入。")
            continue

        if validator(user_input):
            return user_input


def interactive_mode():
    print("=" * 60)
    print("          ✨ 博客初始化向导 ✨")
    print("=" * 60)
    print()

    username = get_validated_input("1. 请输入用户名 (用于博客地址)", validate_username)
    nickname = get_validated_input("2. 请输入昵称 (可选)", lambda x: True, allow_empty=True,
                                   optional_default=username)
    blog_title = get_validated_input("3. 请输入博客标题 (可选)", lambda x: True, allow_empty=True)
    blog_url = get_validated_input("4. 请输入博客地址 (可选)", validate_url, allow_empty=True)
    locale = get_validated_input("5. 请输入语言", validate_locale, allow_empty=True,
                                 optional_default=settings.DEFAULT_LOCALE)

    confirm = get_validated_input("确认创建此博客? (y/n)", validate_yes_no).lower()
    if confirm == 'y':
        create_blog(username, nickname, blog_title, blog_url, locale)
    else:
        print("\n🚀 操作已取消。")


if __name__ == "__main__":
    interactive_mode()
