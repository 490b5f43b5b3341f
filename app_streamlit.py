import streamlit as st

from agent.orchestrator import get_recommendation
from matching.config import setup_logging
from matching.errors import CatalogError, RecommendationError

setup_logging()

st.set_page_config(page_title="CarMatch — Trip Recommender", layout="wide")

st.title("CarMatch — Vehicle Recommendation")

with st.sidebar:
    st.header("Locations")
    house_lat = st.number_input("Home latitude", value=37.77, format="%.5f")
    house_lng = st.number_input("Home longitude", value=-122.42, format="%.5f")
    work_lat = st.number_input("Workplace latitude", value=37.80, format="%.5f")
    work_lng = st.number_input("Workplace longitude", value=-122.27, format="%.5f")
    hol_lat = st.number_input("Holiday latitude", value=34.05, format="%.5f")
    hol_lng = st.number_input("Holiday longitude", value=-118.24, format="%.5f")

    st.header("Preferences")
    min_seats = st.number_input("Minimum seats", min_value=1, max_value=9, value=5, step=1)
    has_kids = st.checkbox("I have kids")
    trunk = st.checkbox("Need trunk space")
    preferred_type = st.selectbox(
        "Vehicle type", ["any", "electric", "hybrid", "suv", "sedan", "compact", "minivan"], index=0
    )

    if st.button("Get recommendation", use_container_width=True):
        st.session_state["run"] = True
        st.session_state["answers"] = {
            "houseLat": house_lat, "houseLng": house_lng,
            "workplaceLat": work_lat, "workplaceLng": work_lng,
            "holidayLat": hol_lat, "holidayLng": hol_lng,
            "minSeats": int(min_seats),
            "hasKids": has_kids,
            "trunk": trunk,
            "preferredType": preferred_type,
        }

if st.session_state.get("run"):
    try:
        res = get_recommendation(st.session_state["answers"])
    except RecommendationError as e:
        st.error(str(e))
        st.stop()
    except CatalogError as e:
        st.error(f"Failed to load catalog: {e}")
        st.stop()

    d = res["display"]
    col1, col2 = st.columns(2)
    for col, title, key in ((col1, "Primary", "primary"), (col2, "Runner-up", "runner_up")):
        v = d[key]
        with col:
            st.subheader(f"{title}: {v['name']}")
            st.caption(v["type"])
            st.write(f"**Seats:** {v['seats']}")
            st.write(f"**Range:** {v['range']}")
            st.write(f"**Trunk Space:** {v['trunk']}")
            st.write(f"**Efficiency:** {v['efficiency']}")
            st.write(f"**Base Price:** {v['base_price']}")

    st.write(f"**Environmental impact:** {res['carbon_label']}")
    st.write(f"**Daily commute:** {d['commute_distance']} • **Holiday trip:** {d['holiday_distance']}")

    st.subheader("Why these vehicles")
    st.write(res["result"]["summary"])

    st.subheader("Estimated operating cost (1 month commute + holiday round trip)")
    c1, c2 = st.columns(2)
    c1.metric(d["primary"]["name"], d["primary_cost"])
    c2.metric(d["runner_up"]["name"], d["runner_up_cost"])
