"""
Zendesk Users API
Create, show and update users, set passwords and profile images
"""

from pathlib import Path
from typing import Any, Union

import httpx

from shared.schemas.user import UserEnvelope

from .client import ApiResult, encode_body, reports_errors
from .errors import ZendeskArgumentError

# Form field Zendesk expects for a photo upload
PHOTO_UPLOAD_FIELD = "user[photo][uploaded_data]"


class UserMixin:
    """
    User operations; mixed into ZendeskAPI on top of ZendeskClientBase.

    Typed calls return an ApiResult of (data, body, response); the password
    and photo calls return the raw (body, response) only.
    """

    @reports_errors
    def create_user(self, payload: Any) -> ApiResult:
        body, response = self._send("POST", "users.json", encode_body({"user": payload}))
        return ApiResult(UserEnvelope.model_validate_json(body).user, body, response)

    @reports_errors
    def show_user(self, user_id: int) -> ApiResult:
        body, response = self._send("GET", f"users/{user_id}.json")
        return ApiResult(UserEnvelope.model_validate_json(body).user, body, response)

    @reports_errors
    def update_user(self, user_id: int, payload: Any) -> ApiResult:
        """
        Update a user.

        Only keys present in the payload are changed; with a User model that
        means the fields explicitly set on it and not None.
        """
        body, response = self._send("PUT", f"users/{user_id}.json", encode_body({"user": payload}))
        return ApiResult(UserEnvelope.model_validate_json(body).user, body, response)

    @reports_errors
    def set_user_password(self, user_id: int, new_password: str) -> tuple[bytes, httpx.Response]:
        """Set a user's password; the response body is returned unparsed"""
        return self._send(
            "POST",
            f"users/{user_id}/password.json",
            encode_body({"password": new_password}),
        )

    @reports_errors
    def update_user_profile_image(
        self,
        user_id: int,
        image_path: Union[str, Path] = "",
        image_link: str = "",
    ) -> tuple[bytes, httpx.Response]:
        """
        Replace a user's photo.

        Args:
            user_id: User to update
            image_path: Local image to upload
            image_link: Remote image URL for Zendesk to fetch

        Exactly one of image_path or image_link is expected. If both are
        given the local file is uploaded and the link ignored.

        Returns:
            Tuple of (response body, response)
        """
        url = f"users/{user_id}.json"
        if image_path:
            return self._send_file("PUT", url, PHOTO_UPLOAD_FIELD, image_path)

        if image_link:
            data = encode_body({"user": {"remote_photo_url": image_link}})
            return self._send("PUT", url, data)

        raise ZendeskArgumentError("Required argument is missing (image_path or image_link)")
