from typing import Optional

from supabase import create_client, Client

from core.config import SUPABASE_KEY, SUPABASE_URL


class SupabaseClient:
    _client: Optional[Client] = None

    @staticmethod
    def get_client() -> Client:
        # Created on first use so the app can start without Supabase credentials
        if SupabaseClient._client is None:
            SupabaseClient._client = create_client(supabase_url=SUPABASE_URL, supabase_key=SUPABASE_KEY)
        return SupabaseClient._client

    @staticmethod
    def get_user(token: str):
        return SupabaseClient.get_client().auth.get_user(token)
