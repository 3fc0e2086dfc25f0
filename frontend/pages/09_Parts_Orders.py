# frontend/pages/09_Parts_Orders.py
import streamlit as st

from api_client import ApiError, put_json, toast
from resource_page import render_resource_page


def mark_delivered(order_id: str, current: dict):
    st.divider()
    st.subheader("🚚 Teslim alındı")
    if current.get("order_status") == "Delivered":
        st.info("Bu sipariş zaten teslim alınmış; stok yeniden artırılmaz.")
        return
    st.caption(f"{current.get('part_name') or current.get('part_id')} stoğu +{current.get('quantity_ordered')} artacak.")
    if st.button("Teslim alındı olarak işaretle", key=f"deliver_{order_id}"):
        try:
            put_json(f"/api/parts-orders/{order_id}", {"order_status": "Delivered"})
            toast(f"Teslim alındı: {order_id}")
        except ApiError as e:
            st.error(f"Teslim hatası: {e}")


render_resource_page("parts-orders", actions=mark_delivered)
