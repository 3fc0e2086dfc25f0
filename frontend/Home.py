# frontend/Home.py
import time

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from api_client import DEFAULT_API_BASE, ApiError, get_json, health

st.set_page_config(page_title="Bayi Yönetim Panosu", layout="wide")
st.title("Bayi Yönetim Panosu")

# --------- Sidebar: Ayarlar / Sağlık ---------
with st.sidebar:
    st.header("Ayarlar")
    st.text_input("API Tabanı", value=DEFAULT_API_BASE, key="api_base")
    refresh = st.button("Yenile", key="btn_refresh")

    st.divider()
    st.subheader("API Sağlık")
    up, payload = health()
    if up:
        st.success(f"API: Tamam ({payload.get('service', '')})")
        try:
            get_json("/db-ping")
            st.success("Veritabanı: Tamam")
        except ApiError as e:
            st.error(f"Veritabanı erişilemedi: {e}")
    else:
        st.error(f"API erişilemedi: {payload}")


@st.cache_data(ttl=30)
def load_totals(base: str):
    """Her kayıt tipi için toplam kayıt sayısı (limit=1 ile yalnız total okunur)."""
    resources = get_json("/api/meta/resources")["data"]
    out = []
    for r in resources:
        body = get_json(f"/api/{r['slug']}", {"limit": 1})
        out.append({"Kayıt tipi": r["title"], "slug": r["slug"], "Toplam": body["total"]})
    return out


@st.cache_data(ttl=30)
def load_headline(base: str):
    low = get_json("/api/parts-inventory", {"low_stock": "true", "limit": 1})["total"]
    po = get_json("/api/parts-orders/stats", {"limit": 500})["data"]
    sr = get_json("/api/customer-service/stats", {"limit": 500})["data"]
    return low, po, sr


if refresh:
    st.cache_data.clear()

status = st.empty()
try:
    status.info("Yükleniyor…")
    base = st.session_state.get("api_base", DEFAULT_API_BASE)
    low, po, sr = load_headline(base)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Düşük stoklu parça", low)
    c2.metric("Bekleyen parça siparişi", po["pending"])
    c3.metric("Sipariş tutarı", f"{po['total_order_value']:,.2f}")
    c4.metric("Açık servis talebi", sr["open"])

    st.subheader("Kayıt sayıları")
    df = pd.DataFrame(load_totals(base))
    if df.empty:
        st.info("Veri yok.")
    else:
        fig = go.Figure(data=[go.Bar(x=df["Kayıt tipi"], y=df["Toplam"], text=df["Toplam"],
                                     textposition="outside", texttemplate="%{text:.0f}")])
        fig.update_layout(margin=dict(l=10, r=10, t=30, b=10), height=380)
        st.plotly_chart(fig, use_container_width=True, key="chart_totals")
        st.dataframe(df.drop(columns=["slug"]), use_container_width=True, height=300)

    status.success("Hazır — " + time.strftime("%H:%M:%S"))
except ApiError as ex:
    status.error(f"Hata: {ex}")
    st.info("İpucu: Sol menüden API Tabanı'nı kontrol et.")
