# frontend/resource_page.py
"""
Tek kayıt tipi için ortak sayfa: filtreler, sayfalı tablo, özet kartları,
meta uçtan üretilen oluştur/düzenle formları ve onaylı silme.
"""
import json

import pandas as pd
import streamlit as st

from api_client import ApiError, delete, get_json, post_json, put_json, toast

SYSTEM_FIELDS = ("id", "created_at", "updated_at")


@st.cache_data(ttl=300)
def load_meta(base: str, slug: str) -> dict:
    return get_json(f"/api/meta/resources/{slug}")["data"]


def _field_types(prop: dict) -> set:
    # Optional[...] alanlar anyOf içinde gelir
    variants = prop.get("anyOf") or [prop]
    return {v.get("type") for v in variants if v.get("type") and v.get("type") != "null"}


def _field_enum(prop: dict):
    for v in prop.get("anyOf") or [prop]:
        if "enum" in v:
            return v["enum"]
    return None


def _widget(name: str, prop: dict, required: bool, current, key: str):
    label = name + (" *" if required else "")
    types = _field_types(prop)
    options = _field_enum(prop)
    if options:
        choices = options if required else [""] + options
        idx = choices.index(current) if current in choices else 0
        return st.selectbox(label, choices, index=idx, key=key) or None
    if types == {"boolean"}:
        return st.checkbox(label, value=bool(current), key=key)
    text = st.text_input(label, value="" if current is None else str(current), key=key)
    return text.strip() or None


def _coerce(name: str, prop: dict, value):
    if value is None or isinstance(value, bool):
        return value
    if "integer" in _field_types(prop) and "number" not in _field_types(prop):
        try:
            return int(value)
        except ValueError:
            raise ApiError(f"'{name}' tamsayı olmalı")
    return value


def _form_values(schema: dict, prefix: str, current: dict | None = None) -> dict:
    props = schema.get("properties", {})
    required = set(schema.get("required", []))
    cols = st.columns(2)
    values = {}
    for i, (name, prop) in enumerate(props.items()):
        with cols[i % 2]:
            cur = (current or {}).get(name)
            values[name] = _widget(name, prop, name in required, cur, f"{prefix}_{name}")
    return values


def _filters(meta: dict) -> dict:
    params = {}
    with st.expander("🔎 Filtreler", expanded=False):
        cols = st.columns(3)
        for i, name in enumerate(meta["filters"]):
            with cols[i % 3]:
                if name == "low_stock":
                    if st.checkbox("Düşük stok", key=f"f_{name}"):
                        params[name] = "true"
                else:
                    v = st.text_input(name, key=f"f_{name}")
                    if v.strip():
                        params[name] = v.strip()
    return params


def _row_key(meta: dict, row: dict) -> str:
    col = meta["lookup"][0]
    return str(row.get(col))


def render_resource_page(slug: str, actions=None):
    """actions: seçili satırla çağrılan ek işlem (ör. parça siparişinde teslim)."""
    st.set_page_config(page_title=slug, layout="wide")
    base = st.session_state.get("api_base", "")

    try:
        meta = load_meta(base, slug)
    except ApiError as e:
        st.error(f"Meta alınamadı: {e}")
        st.stop()

    st.title(meta["title"])
    with st.sidebar:
        st.info(f"Anahtar: {meta['business_key']} · Arama: {', '.join(meta['lookup'])}")

    params = _filters(meta)
    c1, c2 = st.columns(2)
    limit = c1.number_input("Sayfa boyutu", min_value=1, max_value=500, value=meta["default_limit"], step=1)
    page = c2.number_input("Sayfa", min_value=1, value=1, step=1)
    params.update(limit=int(limit), page=int(page))

    # --- Özet kartlar ---
    try:
        stats = get_json(f"/api/{slug}/stats", params)
        cards = st.columns(max(1, len(stats["data"])))
        for col, (k, v) in zip(cards, stats["data"].items()):
            col.metric(k.replace("_", " ").title(), "—" if v is None else v)
    except ApiError as e:
        st.warning(f"Özet alınamadı: {e}")

    # --- Liste ---
    rows = []
    try:
        body = get_json(f"/api/{slug}", params)
        rows = body["data"]
        st.caption(f"Toplam {body['total']} kayıt · sayfa {body.get('page', 1)}/{body.get('pages', 1) or 1}")
        df = pd.DataFrame(rows)
        if df.empty:
            st.info("Kayıt yok.")
        else:
            st.dataframe(df, use_container_width=True, height=360)
            st.download_button("CSV indir", df.to_csv(index=False).encode("utf-8"), f"{slug}.csv", "text/csv")
    except ApiError as e:
        st.error(f"Liste alınamadı: {e}")

    st.divider()
    tab_new, tab_edit, tab_del = st.tabs(["➕ Yeni", "✏️ Düzenle", "🗑️ Sil"])

    # --- Oluştur ---
    with tab_new:
        with st.form(f"create_{slug}", clear_on_submit=False):
            values = _form_values(meta["create_schema"], f"new_{slug}")
            submitted = st.form_submit_button("Kaydet")
        if submitted:
            props = meta["create_schema"].get("properties", {})
            try:
                payload = {k: _coerce(k, props[k], v) for k, v in values.items() if v is not None}
                res = post_json(f"/api/{slug}", payload)
                toast(f"Oluşturuldu: {res['data'].get(meta['business_key'])}")
            except ApiError as e:
                st.error(f"Oluşturma hatası: {e}")

    keys = [_row_key(meta, r) for r in rows]
    by_key = dict(zip(keys, rows))

    # --- Düzenle (yalnız değişen alanlar gönderilir) ---
    with tab_edit:
        if not keys:
            st.info("Düzenlenecek kayıt yok.")
        else:
            sel = st.selectbox("Kayıt", keys, key=f"edit_sel_{slug}")
            current = by_key[sel]
            with st.form(f"edit_{slug}"):
                values = _form_values(meta["update_schema"], f"edit_{slug}_{sel}", current)
                submitted = st.form_submit_button("Güncelle")
            if submitted:
                props = meta["update_schema"].get("properties", {})
                try:
                    changes = {
                        k: _coerce(k, props[k], v) for k, v in values.items()
                        if v != current.get(k) and str(v) != str(current.get(k))
                    }
                    if not changes:
                        st.info("Değişiklik yok.")
                    else:
                        put_json(f"/api/{slug}/{sel}", changes)
                        toast(f"Güncellendi: {sel}")
                except ApiError as e:
                    st.error(f"Güncelleme hatası: {e}")
            if actions is not None:
                actions(sel, current)

    # --- Sil (onay kutusu ile) ---
    with tab_del:
        if keys:
            sel = st.selectbox("Kayıt", keys, key=f"del_sel_{slug}")
            st.code(json.dumps(by_key[sel], ensure_ascii=False, indent=2, default=str), language="json")
            sure = st.checkbox("Silmek istediğime eminim", key=f"del_ok_{slug}")
            if st.button("Sil", disabled=not sure, key=f"del_btn_{slug}"):
                try:
                    res = delete(f"/api/{slug}/{sel}")
                    toast(res.get("message", "Silindi"))
                except ApiError as e:
                    st.error(f"Silme hatası: {e}")
        else:
            st.info("Silinecek kayıt yok.")
