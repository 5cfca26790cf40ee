"""Conversions between form/component field names and API field names."""

from typing import Any

from videobelajar.core.security import random_avatar_url


def transform_user_data(form: dict[str, Any]) -> dict[str, Any]:
    """Registration/admin form -> backend user body; new accounts are students."""
    return {
        "name": form.get("fullName"),
        "email": form.get("email"),
        "phone": form.get("phoneNumber"),
        "password": form.get("password"),
        "gender": form.get("gender"),
        "role": "student",
    }


def transform_mock_user_data(form: dict[str, Any]) -> dict[str, Any]:
    """Same as transform_user_data for the mock API, which also needs an avatar."""
    data = transform_user_data(form)
    data["role"] = "Student"
    data["avatar"] = random_avatar_url(0, 99)
    return data


def transform_product_data(course: dict[str, Any], review_key: str = "review_count") -> dict[str, Any]:
    """
    Course form -> API body.

    rating and reviewCount arrive as strings from the form; price gets the "K" suffix.
    The mock API stores the review count as reviewCount, so callers pass review_key.
    """
    return {
        "photos": course.get("courseImage"),
        "title": course.get("title"),
        "description": course.get("description"),
        "mentor": course.get("tutorName"),
        "rolementor": course.get("position"),
        "avatar": course.get("tutorImage"),
        "company": course.get("company"),
        "rating": float(course.get("rating") or 0),
        review_key: int(course.get("reviewCount") or 0),
        "price": f"{course.get('price', '')}K",
        "category": course.get("category"),
    }


def transform_api_user_to_form(user: dict[str, Any]) -> dict[str, Any]:
    """API user -> edit form; the password is never copied back."""
    return {
        "fullName": user.get("name"),
        "email": user.get("email"),
        "phoneNumber": user.get("phone"),
        "gender": user.get("gender"),
    }


def _review_count(course: dict[str, Any]) -> Any:
    if course.get("review_count") is not None:
        return course["review_count"]
    return course.get("reviewCount")


def transform_api_product_to_form(course: dict[str, Any]) -> dict[str, Any]:
    rating = course.get("rating")
    review_count = _review_count(course)
    price = course.get("price")
    return {
        "title": course.get("title"),
        "description": course.get("description"),
        "tutorName": course.get("mentor"),
        "position": course.get("rolementor"),
        "company": course.get("company"),
        "rating": str(rating) if rating is not None else "0",
        "reviewCount": str(review_count) if review_count is not None else "0",
        "price": price.replace("K", "") if price else "0",
        "category": course.get("category"),
        "courseImage": course.get("photos"),
        "tutorImage": course.get("avatar"),
    }


def course_to_component(course: dict[str, Any]) -> dict[str, Any]:
    """API course -> the shape the course cards render."""
    return {
        "id": course.get("id"),
        "courseImage": course.get("photos"),
        "title": course.get("title"),
        "description": course.get("description"),
        "tutorImage": course.get("avatar"),
        "tutorName": course.get("mentor"),
        "position": course.get("rolementor"),
        "company": course.get("company"),
        "rating": course.get("rating"),
        "reviewCount": _review_count(course),
        "price": course.get("price"),
        "category": course.get("category"),
        "createdAt": course.get("created_at"),
        "updatedAt": course.get("updated_at"),
    }
