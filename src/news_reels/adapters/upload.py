"""
IUploader adapter: uploads and schedules reels on YouTube using the
YouTube Data API v3.
"""

import os
from typing import Any, Dict, List, Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.http import MediaFileUpload

from news_reels import config
from news_reels.ports.interfaces import IUploader

# YouTube API scopes
SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
    "https://www.googleapis.com/auth/youtube.readonly",
]


class YouTubeUploader(IUploader):
    """
    Handles uploading videos to a YouTube channel.

    The first run opens the OAuth consent page (offline access); the token is
    stored in `token_file` and refreshed on later runs.
    """

    def __init__(self, credentials_file: Optional[str] = None, token_file: Optional[str] = None):
        self.credentials_file = credentials_file or config.YOUTUBE_CREDENTIALS_FILE
        self.token_file = token_file or config.YOUTUBE_TOKEN_FILE
        self.youtube = None
        self.credentials = None

    def authenticate(self) -> bool:
        """
        Authenticate with YouTube API using OAuth2
        Returns True if successful, False otherwise
        """
        try:
            if os.path.exists(self.token_file):
                self.credentials = Credentials.from_authorized_user_file(self.token_file, SCOPES)

            if not self.credentials or not self.credentials.valid:
                if self.credentials and self.credentials.expired and self.credentials.refresh_token:
                    self.credentials.refresh(Request())
                else:
                    if not os.path.exists(self.credentials_file):
                        print(f"❌ Credentials file not found: {self.credentials_file}")
                        print("   Download OAuth2 desktop credentials from Google Cloud Console")
                        return False
                    flow = InstalledAppFlow.from_client_secrets_file(self.credentials_file, SCOPES)
                    self.credentials = flow.run_local_server(
                        port=0, access_type="offline", prompt="consent"
                    )

                with open(self.token_file, "w") as token:
                    token.write(self.credentials.to_json())
                print(f"  ✅ Token stored to {self.token_file}")

            self.youtube = build("youtube", "v3", credentials=self.credentials)
            print("✅ YouTube API authenticated successfully")
            return True

        except Exception as e:
            print(f"❌ Authentication failed: {e}")
            return False

    def upload_video(
        self,
        video_path: str,
        title: str,
        description: str = "",
        tags: Optional[List[str]] = None,
        category_id: str = "25",
        privacy_status: str = "private",
        publish_at: Optional[str] = None,
        default_language: Optional[str] = None,
        thumbnail_path: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Upload video to YouTube

        Args:
            video_path: Path to video file
            title: Video title
            description: Video description
            tags: List of tags
            category_id: YouTube category ID (default: 25 for News & Politics)
            privacy_status: public, unlisted, or private
            publish_at: RFC 3339 time; the video stays private until then
            default_language: BCP-47 code for title/description and audio
            thumbnail_path: Optional path to thumbnail image

        Returns:
            Video ID and URL if successful, None otherwise
        """
        if not self.youtube:
            if not self.authenticate():
                return None

        if not os.path.exists(video_path):
            print(f"❌ Video file not found: {video_path}")
            return None

        snippet = {
            "title": title[:100],
            "description": description,
            "tags": tags or [],
            "categoryId": category_id,
        }
        if default_language:
            snippet["defaultLanguage"] = default_language
            snippet["defaultAudioLanguage"] = default_language

        status = {
            "privacyStatus": "private" if publish_at else privacy_status,
            "selfDeclaredMadeForKids": False,
            "license": "youtube",
            "embeddable": True,
            "publicStatsViewable": True,
        }
        if publish_at:
            status["publishAt"] = publish_at

        body = {"snippet": snippet, "status": status}

        try:
            media = MediaFileUpload(video_path, chunksize=-1, resumable=True, mimetype="video/*")

            print(f"📤 Uploading video to YouTube: {title}")
            print(f"   File: {video_path}")
            print(f"   Privacy: {status['privacyStatus']}" + (f" (publish at {publish_at})" if publish_at else ""))

            insert_request = self.youtube.videos().insert(
                part=",".join(body.keys()),
                body=body,
                media_body=media,
            )
            response = self._resumable_upload(insert_request)
            if not response:
                print("❌ Upload failed")
                return None

            video_id = response["id"]
            video_url = f"https://www.youtube.com/watch?v={video_id}"
            print("✅ Video uploaded successfully!")
            print(f"   Video ID: {video_id}")
            print(f"   URL: {video_url}")

            if thumbnail_path and os.path.exists(thumbnail_path):
                try:
                    self.youtube.thumbnails().set(
                        videoId=video_id,
                        media_body=MediaFileUpload(thumbnail_path),
                    ).execute()
                    print("✅ Thumbnail uploaded")
                except Exception as e:
                    print(f"⚠️  Could not upload thumbnail: {e}")

            return {
                "video_id": video_id,
                "url": video_url,
                "title": title,
                "scheduled_at": publish_at,
            }

        except Exception as e:
            print(f"❌ Error uploading video: {e}")
            return None

    def _resumable_upload(self, insert_request):
        """
        Execute resumable upload with progress tracking
        """
        response = None
        retry = 0

        while response is None:
            try:
                status, response = insert_request.next_chunk()
                if response is not None:
                    if "id" in response:
                        print("\n   Upload complete ✅")
                        return response
                    print(f"\n   ❌ Unexpected response: {response}")
                    return None
                if status:
                    progress = int(status.progress() * 100)
                    print(f"\r   Upload progress: {progress}%", end="", flush=True)
            except Exception as e:
                retry += 1
                if retry > 3:
                    print(f"\n   ❌ Upload failed after {retry} retries: {e}")
                    return None
                print(f"\n   ⚠️  Upload error (retry {retry}/3): {e}")

        return response
