# Learnly Streamlit front end: paste or upload course text, generate study material
from html import escape

import streamlit as st

from api_client import ApiResult, LearnlyClient
from study_state import INPUT_TAB, TABS, UPLOAD_ACTION, StudyState

st.set_page_config(page_title="Learnly", layout="wide")

TAB_LABELS = {
    INPUT_TAB: "📄 Text",
    "flashcards": "🃏 Flashcards",
    "quiz": "❓ Quiz",
    "summary": "📝 Summary",
    "exam_questions": "🎓 Exam questions",
}

ACTIONS = [
    ("flashcards", "Make flashcards"),
    ("quiz", "Generate quiz"),
    ("summary", "Summarize"),
    ("exam_questions", "Exam questions"),
]

# --- Style ---
st.markdown("""
    <style>
        .card { border: 1px solid #e5e7eb; border-radius: 16px; padding: 16px; margin-bottom: 12px; }
        .card-q { font-weight: 600; }
        .option { padding: 2px 0; }
        .correct { color: #15803d; font-weight: 600; }
    </style>
""", unsafe_allow_html=True)

# --- Init State ---
if "study" not in st.session_state:
    st.session_state.study = StudyState()
if "client" not in st.session_state:
    st.session_state.client = LearnlyClient()

state: StudyState = st.session_state.study
client: LearnlyClient = st.session_state.client

st.title("📚 Learnly — your modern study buddy")
st.caption("Paste text from your course or upload a PDF, then turn it into flashcards, quizzes, summaries and exam questions.")

if state.error:
    st.error(state.error)

# --- Input ---
st.header("Your course text")
state.text = st.text_area("Paste your text here...", value=state.text, height=240)

uploaded = st.file_uploader("...or upload a PDF", type=["pdf"])
if uploaded is not None and st.button("Extract text from PDF", key="extract_pdf", disabled=state.is_processing):
    state.begin(UPLOAD_ACTION)
    st.rerun()

columns = st.columns(len(ACTIONS))
for column, (artifact, label) in zip(columns, ACTIONS):
    if column.button(label, key=f"generate_{artifact}", disabled=not state.can_submit()):
        state.begin(artifact)
        st.rerun()

# --- Pending request: every control above is already drawn disabled on this pass ---
if state.pending:
    action = state.pending
    try:
        if action == UPLOAD_ACTION:
            if uploaded is None:
                result = ApiResult.failure("No PDF file uploaded")
            else:
                with st.spinner("Processing PDF..."):
                    result = client.upload_pdf(uploaded.name, uploaded.getvalue())
            state.apply_upload(result)
        else:
            with st.spinner(f"{dict(ACTIONS)[action]}..."):
                result = client.generate(action, state.text)
            state.apply_generation(action, result)
    finally:
        state.finish()
    st.rerun()

# --- Results ---
state.active_tab = st.radio(
    "View",
    TABS,
    index=TABS.index(state.active_tab),
    format_func=TAB_LABELS.get,
    horizontal=True,
)


def render_flashcards(cards):
    st.subheader(f"Flashcards ({len(cards)} cards)")
    grid = st.columns(3)
    for i, card in enumerate(cards):
        with grid[i % 3]:
            st.markdown(
                f"<div class='card'><div class='card-q'>{escape(card.get('q', ''))}</div><p>{escape(card.get('a', ''))}</p></div>",
                unsafe_allow_html=True,
            )


def render_quiz(questions):
    st.subheader(f"Quiz ({len(questions)} questions)")
    for i, question in enumerate(questions, start=1):
        st.markdown(f"**{i}. {question.get('q', '')}**")
        for j, option in enumerate(question.get("opts", [])):
            css = "option correct" if j == question.get("correct") else "option"
            mark = " ✓" if j == question.get("correct") else ""
            st.markdown(f"<div class='{css}'>{chr(65 + j)}. {escape(option)}{mark}</div>", unsafe_allow_html=True)


def render_exam_questions(questions):
    st.subheader(f"Exam questions ({len(questions)})")
    for i, question in enumerate(questions, start=1):
        st.markdown(f"**Question {i}** · {question.get('points', 0)} points")
        st.markdown(question.get("q", ""))


if state.active_tab == INPUT_TAB:
    st.info(f"{len(state.text.strip())} characters ready.")
elif state.active_tab == "flashcards":
    if state.flashcards:
        render_flashcards(state.flashcards)
    else:
        st.info("No flashcards yet.")
elif state.active_tab == "quiz":
    if state.quiz:
        render_quiz(state.quiz)
    else:
        st.info("No quiz yet.")
elif state.active_tab == "summary":
    if state.summary:
        st.markdown(state.summary)
    else:
        st.info("No summary yet.")
elif state.active_tab == "exam_questions":
    if state.exam_questions:
        render_exam_questions(state.exam_questions)
    else:
        st.info("No exam questions yet.")
