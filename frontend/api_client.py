# frontend/api_client.py
import os

import requests
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
TIMEOUT = 15


class ApiError(Exception):
    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        self.status = status; self.url = url; super().__init__(message)


def api_base() -> str:
    return (st.session_state.get("api_base") or DEFAULT_API_BASE).strip().rstrip("/")


def _request(method: str, path: str, *, params=None, payload=None) -> dict:
    url = f"{api_base()}{path}"
    try:
        r = requests.request(method, url, params=params, json=payload, timeout=TIMEOUT)
    except requests.Timeout:
        raise ApiError("Zaman aşımı.", url=url)
    except requests.ConnectionError:
        raise ApiError("Bağlantı kurulamadı: API kapalı ya da URL yanlış.", url=url)
    except requests.RequestException as e:
        raise ApiError(f"Ağ hatası: {e}", url=url)

    try:
        body = r.json()
    except ValueError:
        body = {}
    # {success:false, error} zarfındaki mesaj gösterilir
    if r.status_code >= 400 or body.get("success") is False:
        raise ApiError(body.get("error") or f"HTTP hata {r.status_code}: {r.text[:160]}", r.status_code, url)
    return body


def get_json(path: str, params=None) -> dict:
    return _request("GET", path, params=params)


def post_json(path: str, payload: dict) -> dict:
    return _request("POST", path, payload=payload)


def put_json(path: str, payload: dict) -> dict:
    return _request("PUT", path, payload=payload)


def delete(path: str) -> dict:
    return _request("DELETE", path)


def health():
    try:
        return True, get_json("/health").get("data", {})
    except ApiError as e:
        return False, str(e)


def toast(msg: str, icon: str = "✅"):
    try:
        st.toast(msg, icon=icon)
    except Exception:
        st.success(msg)
