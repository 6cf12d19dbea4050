from __future__ import annotations

from datetime import date

import altair as alt
import pandas as pd
import requests
import streamlit as st

from runplan.core.settings import settings

BACKEND_URL = settings.backend_url

GOALS = {
    "weight-loss": ("🏃 Lose Weight", "Burn calories and shed weight with running"),
    "general-fitness": ("💪 General Fitness", "Improve your endurance and overall health"),
    "race-training": ("⏱️ Train for a Race", "Prepare for 5K, 10K, Half or Full Marathon"),
}
DAY_LABELS = {
    "monday": "Mon",
    "tuesday": "Tue",
    "wednesday": "Wed",
    "thursday": "Thu",
    "friday": "Fri",
    "saturday": "Sat",
    "sunday": "Sun",
}
INTENSITY_COLORS = {
    "easy": "#2E7D32",
    "moderate": "#F9A825",
    "hard": "#C62828",
    "rest": "#9E9E9E",
}
COACH_ERROR_REPLY = "Sorry, I could not reach the coach just now. Please try again in a moment."

# -------------------------------------------------
# Session State
# -------------------------------------------------
if "selected_goal" not in st.session_state:
    st.session_state.selected_goal = None
if "plan" not in st.session_state:
    st.session_state.plan = None
if "plan_request" not in st.session_state:
    st.session_state.plan_request = None
if "plan_summary" not in st.session_state:
    st.session_state.plan_summary = None
if "show_coach" not in st.session_state:
    st.session_state.show_coach = False
if "coach_chat" not in st.session_state:
    st.session_state.coach_chat = []
if "coach_input" not in st.session_state:
    st.session_state.coach_input = ""


# -------------------------------------------------
# Helpers
# -------------------------------------------------
def reset_wizard() -> None:
    st.session_state.selected_goal = None
    st.session_state.plan = None
    st.session_state.plan_request = None
    st.session_state.plan_summary = None
    st.session_state.show_coach = False
    st.session_state.coach_chat = []


def select_goal(goal: str) -> None:
    st.session_state.selected_goal = goal
    st.session_state.plan = None
    st.session_state.plan_summary = None
    st.session_state.show_coach = False


def submit_plan(payload: dict) -> None:
    try:
        resp = requests.post(f"{BACKEND_URL}/plans", json=payload, timeout=20)
    except requests.RequestException:
        st.error("Could not reach the plan service. Is the API server running?")
        return

    if resp.status_code == 400:
        detail = resp.json().get("detail", {})
        st.error("Missing information: " + "; ".join(detail.get("details", [])))
        return
    if resp.status_code == 422:
        st.error("Please fill in all required fields.")
        return
    if not resp.ok:
        st.error("There was a problem generating your plan. Please try again.")
        return

    st.session_state.plan = resp.json()
    st.session_state.plan_request = payload
    st.session_state.plan_summary = fetch_plan_summary(payload)


def fetch_plan_summary(payload: dict) -> dict | None:
    try:
        resp = requests.post(f"{BACKEND_URL}/plans/summary", json=payload, timeout=20)
    except requests.RequestException:
        return None
    return resp.json() if resp.ok else None


def submit_coach_message() -> None:
    user_text = st.session_state.coach_input.strip()
    if not user_text:
        return

    st.session_state.coach_chat.append({"role": "user", "content": user_text})

    with st.spinner("Coach is thinking..."):
        try:
            resp = requests.post(f"{BACKEND_URL}/coach/chat", json={"message": user_text}, timeout=20)
            reply = resp.json().get("reply", "No response from coach.") if resp.ok else COACH_ERROR_REPLY
        except requests.RequestException:
            reply = COACH_ERROR_REPLY

    st.session_state.coach_chat.append({"role": "assistant", "content": reply})

    # SAFE reset
    st.session_state.coach_input = ""


def training_day_picker(key: str, defaults: list[str]) -> list[str]:
    st.markdown("**Preferred Training Days** \\*")
    columns = st.columns(len(DAY_LABELS))
    selected = []
    for column, (day, label) in zip(columns, DAY_LABELS.items()):
        with column:
            if st.checkbox(label, value=day in defaults, key=f"{key}_{day}"):
                selected.append(day)
    return selected


# -------------------------------------------------
# Forms
# -------------------------------------------------
def weight_loss_form() -> dict | None:
    with st.form("weight_loss_form"):
        left, right = st.columns(2)
        with left:
            current_weight = st.number_input("Current Weight (kg) *", min_value=0.0, value=0.0)
            target_weight = st.number_input("Target Weight (kg) *", min_value=0.0, value=0.0)
            height = st.number_input("Height (cm) *", min_value=0.0, value=0.0)
            timeframe = st.number_input("Weight Loss Timeframe (months) *", min_value=1, max_value=24, value=3)
        with right:
            activity = st.selectbox(
                "Daily Activity Level *",
                ["sedentary", "lightly-active", "moderately-active", "very-active"],
                index=None,
            )
            stress = st.slider("Stress Level *", min_value=1, max_value=5, value=3)
            tracking = st.toggle("Tracking Calories", value=False)
        days = training_day_picker("wl", ["monday", "wednesday", "friday"])
        dietary = st.text_area("Dietary Preferences (Optional)")
        injuries = st.text_area("Injury History")
        if not st.form_submit_button("Generate Weight Loss Running Plan", use_container_width=True):
            return None

    return {
        "goal_type": "weight-loss",
        "current_weight_kg": current_weight,
        "target_weight_kg": target_weight,
        "height_cm": height,
        "timeframe_months": timeframe,
        "stress_level": stress,
        "activity_level": activity,
        "training_days": days,
        "injury_history": injuries,
        "dietary_preferences": dietary,
        "tracking_calories": tracking,
    }


def fitness_form() -> dict | None:
    with st.form("fitness_form"):
        left, right = st.columns(2)
        with left:
            volume = st.number_input("Current Weekly Running Volume (km) *", min_value=0.0, value=0.0)
            level = st.selectbox("Fitness Level *", ["beginner", "intermediate", "advanced"], index=None)
            focus = st.selectbox("Primary Focus *", ["endurance", "maintenance", "speed"], index=None)
        with right:
            strength = st.toggle("Include Strength Training", value=True)
        days = training_day_picker("gf", ["monday", "wednesday", "saturday"])
        injuries = st.text_area("Injury History")
        if not st.form_submit_button("Generate General Fitness Plan", use_container_width=True):
            return None

    return {
        "goal_type": "general-fitness",
        "current_volume_km": volume,
        "fitness_level": level,
        "primary_focus": focus,
        "strength_training": strength,
        "training_days": days,
        "injury_history": injuries,
    }


def race_form() -> dict | None:
    with st.form("race_form"):
        left, right = st.columns(2)
        with left:
            distance = st.selectbox("Race Distance *", ["5k", "10k", "half-marathon", "marathon", "ultra"], index=None)
            race_date = st.date_input("Race Date *", min_value=date.today())
            target_time = st.text_input("Target Finish Time *", placeholder="e.g. 1:45:00 for Half Marathon")
            volume = st.number_input("Current Weekly Running Volume (km) *", min_value=0.0, value=0.0)
            longest = st.number_input("Longest Recent Run (km) *", min_value=0.0, value=0.0)
        with right:
            approach = st.selectbox(
                "Training Approach *", ["traditional", "speed", "high-mileage", "low-mileage"], index=None
            )
            terrain = st.selectbox("Race Terrain *", ["road", "mixed", "hilly", "trail"], index=None)
            strength = st.toggle("Include Strength Training", value=True)
            recent_distance = st.selectbox(
                "Recent Race Distance (optional)", ["5k", "10k", "half-marathon", "marathon", "ultra"], index=None
            )
            recent_time = st.text_input("Recent Race Time (optional)", placeholder="e.g. 24:30")
        days = training_day_picker("rt", ["tuesday", "thursday", "saturday"])
        injuries = st.text_area("Injury History")
        if not st.form_submit_button("Generate Race Training Plan", use_container_width=True):
            return None

    return {
        "goal_type": "race-training",
        "race_distance": distance,
        "race_date": race_date.isoformat() if race_date else None,
        "target_time": target_time,
        "current_volume_km": volume,
        "longest_run_km": longest,
        "approach_preference": approach,
        "race_terrain": terrain,
        "strength_training": strength,
        "training_days": days,
        "injury_history": injuries,
        "recent_race_distance": recent_distance,
        "recent_race_time": recent_time or None,
    }


# -------------------------------------------------
# Plan display
# -------------------------------------------------
def render_plan(plan: dict) -> None:
    st.markdown(f"## {plan['title']}")
    st.caption(plan["subtitle"])

    if st.button("← Start over"):
        reset_wizard()
        st.rerun()

    weekly_tab, summary_tab = st.tabs(["Weekly Plan", "Plan Summary"])

    with weekly_tab:
        weeks = {week["week_number"]: week for week in plan["weeks"]}
        week_number = st.radio("Week", list(weeks), horizontal=True, format_func=lambda n: f"Week {n}")
        week = weeks[week_number]
        st.markdown(f"**Week {week['week_number']} - {week['total_distance_km']} km**")
        frame = pd.DataFrame(
            [
                {
                    "Day": day["day"],
                    "Intensity": day["intensity"].capitalize(),
                    "Workout": day["workout_type"],
                    "km": day["distance_km"] or None,
                    "Description": day["description"],
                    "Pace": day.get("pace_guidance") or "",
                }
                for day in week["days"]
            ]
        )
        styled = frame.style.map(
            lambda value: f"color: {INTENSITY_COLORS.get(value.lower(), 'inherit')}", subset=["Intensity"]
        )
        st.dataframe(styled, hide_index=True, use_container_width=True)

    with summary_tab:
        duration = plan["duration_weeks"]
        total = plan["total_distance_km"]
        c1, c2, c3 = st.columns(3)
        c1.metric("Duration", f"{duration} weeks")
        c2.metric("Total Distance", f"{total} km")
        summary = st.session_state.plan_summary
        weekly_average = f"{summary['weekly_average_km']:.1f} km" if summary else "n/a"
        c3.metric("Weekly Average", weekly_average)

        volume = pd.DataFrame(
            [{"Week": week["week_number"], "km": week["total_distance_km"]} for week in plan["weeks"]]
        )
        st.altair_chart(
            alt.Chart(volume).mark_bar().encode(x="Week:O", y="km:Q", tooltip=["Week", "km"]),
            use_container_width=True,
        )

        if plan.get("paces"):
            st.markdown("#### Training Paces")
            st.table(pd.DataFrame([plan["paces"]]).rename(columns=str.capitalize))

        st.markdown("#### Key Features")
        for feature in plan["key_features"]:
            st.markdown(f"- {feature}")
        st.markdown("#### Notes")
        for note in plan["notes"]:
            st.markdown(f"- {note}")

    if st.session_state.plan_request:
        try:
            printable = requests.post(
                f"{BACKEND_URL}/plans/print", json=st.session_state.plan_request, timeout=20
            ).text
            st.download_button("Download printable plan", printable, file_name="running_plan.txt")
        except requests.RequestException:
            st.warning("Printable view unavailable.")

    if st.button("Ask the AI Coach"):
        st.session_state.show_coach = True


def render_coach() -> None:
    st.markdown("## Your AI Running Coach")
    if not st.session_state.coach_chat:
        try:
            greeting = requests.get(f"{BACKEND_URL}/coach/greeting", timeout=5).json()["reply"]
        except requests.RequestException:
            greeting = "Hi there! I'm your AI running coach."
        st.session_state.coach_chat.append({"role": "assistant", "content": greeting})

    for message in st.session_state.coach_chat:
        with st.chat_message(message["role"]):
            st.markdown(message["content"])

    st.text_input(
        "Ask a question about running or your plan...",
        key="coach_input",
        on_change=submit_coach_message,
    )


def render_faq() -> None:
    st.markdown("## Frequently Asked Questions")
    try:
        entries = requests.get(f"{BACKEND_URL}/faq", timeout=5).json()
    except requests.RequestException:
        st.info("FAQ unavailable.")
        return
    for entry in entries:
        with st.expander(entry["question"]):
            st.markdown(entry["intro"])
            for point in entry["points"]:
                st.markdown(f"- {point}")
            for paragraph in entry["closing"]:
                st.markdown(paragraph)


# -------------------------------------------------
# Page
# -------------------------------------------------
st.set_page_config(page_title="Running Plan Generator", layout="wide")

if st.session_state.plan is None:
    st.markdown("# Generate Your **Personalized** Running Plan")
    st.markdown(
        "Whether you're looking to lose weight, improve general fitness, or train for a race, "
        "we'll create a customized plan just for you."
    )

    if st.session_state.selected_goal is None:
        st.markdown("### What's your running goal?")
        for column, (goal, (title, description)) in zip(st.columns(3), GOALS.items()):
            with column:
                st.markdown(f"#### {title}")
                st.caption(description)
                st.button("Select", key=f"goal_{goal}", on_click=select_goal, args=(goal,))
    else:
        if st.button("← Change goal"):
            reset_wizard()
            st.rerun()
        forms = {"weight-loss": weight_loss_form, "general-fitness": fitness_form, "race-training": race_form}
        payload = forms[st.session_state.selected_goal]()
        if payload is not None:
            submit_plan(payload)
            if st.session_state.plan is not None:
                st.rerun()

    render_faq()
else:
    render_plan(st.session_state.plan)

if st.session_state.show_coach:
    render_coach()
