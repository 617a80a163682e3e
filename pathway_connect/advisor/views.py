import json
import logging

from django.contrib import messages
from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST
from django.views.generic import View

from .client import get_client
from .exceptions import AdvisorError
from .export import CONTENT_TYPES, export_filename, render as render_export
from .forms import CareerPlanForm, ChatForm, PlanTextForm
from .prompts import PLAN_PREFIX, ROLE_ASSISTANT, ROLE_USER, SUMMARY_PREFIX, format_preferences
from .session import ConversationStore

logger = logging.getLogger(__name__)


def _error_payload(exc: AdvisorError):
    return {"error": exc.user_message, "kind": exc.kind}


@require_POST
def advisor_api(request):
    """
    JSON proxy: ``{"userInput": "...", "conversationHistory": [...]}`` in,
    ``{"response": "..."}`` out. Stateless; the caller sends the history.
    """
    try:
        data = json.loads(request.body or "{}")
    except json.JSONDecodeError:
        return JsonResponse({"error": "Invalid JSON", "kind": "bad_request"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"error": "Invalid JSON", "kind": "bad_request"}, status=400)

    user_input = data.get("userInput")
    if not isinstance(user_input, str) or not user_input.strip():
        return JsonResponse({"error": "userInput is required", "kind": "bad_request"}, status=400)
    user_input = user_input.strip()
    history = data.get("conversationHistory") or []
    if not isinstance(history, list):
        history = []
    history = [turn for turn in history if isinstance(turn, dict)]

    try:
        reply = get_client().advise(user_input, history)
    except AdvisorError as exc:
        logger.warning("Career advisor API call failed (%s): %s", exc.kind, exc)
        status = exc.status if exc.status in (402, 429) else 500
        return JsonResponse(_error_payload(exc), status=status)
    return JsonResponse({"response": reply})


class ChatView(View):
    template_name = "advisor/chat.html"

    def get(self, request):
        store = ConversationStore(request.session)
        return render(request, self.template_name, {"form": ChatForm(), "conversation": store.history()})

    def post(self, request):
        store = ConversationStore(request.session)
        form = ChatForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form, "conversation": store.history()})

        user_input = form.cleaned_data["message"]
        try:
            reply = get_client().advise(user_input, store.history())
        except AdvisorError as exc:
            logger.warning("Career advisor chat failed (%s): %s", exc.kind, exc)
            messages.error(request, exc.user_message)
        else:
            # both turns or neither, so the history keeps alternating roles
            store.append(ROLE_USER, user_input)
            store.append(ROLE_ASSISTANT, reply)
        return redirect("advisor_chat")


@require_POST
def clear_conversation(request):
    ConversationStore(request.session).clear()
    messages.success(request, "Conversation cleared.")
    return redirect("advisor_chat")


class CareerPlanView(View):
    """Questionnaire in, generated plan out. The plan is shown but not stored."""

    template_name = "advisor/career_plan.html"

    def get(self, request):
        return render(request, self.template_name, {"form": CareerPlanForm()})

    def post(self, request):
        form = CareerPlanForm(request.POST)
        context = {"form": form}
        if not form.is_valid():
            return render(request, self.template_name, context)

        prompt = PLAN_PREFIX + "\n" + format_preferences(form.preferences()) + "\n"
        try:
            context["plan"] = get_client().advise(prompt, [])
        except AdvisorError as exc:
            logger.warning("Career plan generation failed (%s): %s", exc.kind, exc)
            messages.error(request, exc.user_message)
        return render(request, self.template_name, context)


@require_POST
def plan_summary(request):
    form = PlanTextForm(request.POST)
    if not form.is_valid():
        messages.error(request, "There is no career plan to summarize.")
        return redirect("advisor_plan")

    plan = form.cleaned_data["plan"]
    context = {"form": CareerPlanForm(), "plan": plan}
    try:
        context["summary"] = get_client().advise(SUMMARY_PREFIX + plan, [])
    except AdvisorError as exc:
        logger.warning("Career plan summary failed (%s): %s", exc.kind, exc)
        messages.error(request, exc.user_message)
    return render(request, CareerPlanView.template_name, context)


@require_POST
def export_plan(request, fmt):
    if fmt not in CONTENT_TYPES:
        raise Http404("Unknown export format")
    form = PlanTextForm(request.POST)
    if not form.is_valid():
        messages.error(request, "There is no career plan to export.")
        return redirect("advisor_plan")

    response = HttpResponse(render_export(fmt, form.cleaned_data["plan"]), content_type=CONTENT_TYPES[fmt])
    response["Content-Disposition"] = f'attachment; filename="{export_filename(fmt)}"'
    return response
