import json
from unittest import mock

import requests
from django.test import SimpleTestCase, TestCase, override_settings
from django.urls import reverse

from .client import NO_RESPONSE, GeminiAdvisorClient, extract_reply
from .exceptions import AdvisorError, PaymentRequired, RateLimited
from .export import render as render_export
from .prompts import PLAN_PREFIX, SUMMARY_PREFIX, SYSTEM_PROMPT, build_contents, format_preferences
from .session import SESSION_KEY


def fake_response(status_code=200, payload=None, text=""):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.json.return_value = payload if payload is not None else {}
    return response


def gemini_payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class PromptTests(SimpleTestCase):
    def test_chat_contents_put_system_prompt_first_and_map_roles(self):
        contents = build_contents("What next?", [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello!"},
        ])
        self.assertEqual(contents[0]["parts"][0]["text"], SYSTEM_PROMPT)
        self.assertEqual([c["role"] for c in contents], ["user", "user", "model", "user"])
        self.assertEqual(contents[-1]["parts"][0]["text"], "What next?")

    def test_plan_prefix_ignores_history(self):
        contents = build_contents(PLAN_PREFIX + "Interests: Art", [{"role": "user", "content": "old"}])
        self.assertEqual(len(contents), 2)
        self.assertIn("Interests: Art", contents[1]["parts"][0]["text"])
        self.assertIn("90-Day Action Plan", contents[1]["parts"][0]["text"])

    def test_history_turns_without_text_content_are_skipped(self):
        contents = build_contents("Next?", [
            {"role": "user", "content": 7},
            {"role": "assistant", "content": ["list"]},
            {"role": "assistant", "content": ""},
            {"role": "assistant", "content": "Kept"},
        ])
        self.assertEqual([c["parts"][0]["text"] for c in contents[1:]], ["Kept", "Next?"])

    def test_summary_prefix(self):
        contents = build_contents(SUMMARY_PREFIX + "My plan")
        self.assertIn("executive summary", contents[1]["parts"][0]["text"])
        self.assertIn("My plan", contents[1]["parts"][0]["text"])

    def test_format_preferences(self):
        text = format_preferences({"interests": ["Art", "Design"], "skills": ["Sales"], "industry": "Retail"})
        self.assertIn("Interests: Art, Design", text)
        self.assertIn("Industry: Retail", text)
        self.assertIn("Work Style: ", text)


class ExtractReplyTests(SimpleTestCase):
    def test_first_candidate_first_part(self):
        self.assertEqual(extract_reply(gemini_payload("Try nursing.")), "Try nursing.")

    def test_fallback_when_shape_is_missing(self):
        self.assertEqual(extract_reply({}), NO_RESPONSE)
        self.assertEqual(extract_reply({"candidates": []}), NO_RESPONSE)


class GeminiAdvisorClientTests(SimpleTestCase):
    def make_client(self):
        return GeminiAdvisorClient(api_key="test-key", model="gemini-test",
                                   endpoint="https://example.test/{model}:generateContent", timeout=5)

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_successful_reply(self, post):
        post.return_value = fake_response(payload=gemini_payload("Consider data analytics."))
        reply = self.make_client().advise("What should I study?", [])
        self.assertEqual(reply, "Consider data analytics.")
        args, kwargs = post.call_args
        self.assertEqual(args[0], "https://example.test/gemini-test:generateContent")
        self.assertEqual(kwargs["params"], {"key": "test-key"})
        self.assertEqual(kwargs["timeout"], 5)
        self.assertEqual(kwargs["json"]["contents"][-1]["parts"][0]["text"], "What should I study?")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_429_is_rate_limited(self, post):
        post.return_value = fake_response(429)
        with self.assertRaises(RateLimited):
            self.make_client().advise("hi")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_402_is_payment_required(self, post):
        post.return_value = fake_response(402)
        with self.assertRaises(PaymentRequired) as ctx:
            self.make_client().advise("hi")
        self.assertNotIsInstance(ctx.exception, RateLimited)

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_other_upstream_errors(self, post):
        post.return_value = fake_response(503, text="unavailable")
        with self.assertRaises(AdvisorError) as ctx:
            self.make_client().advise("hi")
        self.assertEqual(ctx.exception.status, 503)

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_transport_failure(self, post):
        post.side_effect = requests.ConnectionError("no route")
        with self.assertRaises(AdvisorError):
            self.make_client().advise("hi")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_missing_key_fails_without_calling_upstream(self, post):
        client = GeminiAdvisorClient(api_key="")
        with self.assertRaises(AdvisorError):
            client.advise("hi")
        post.assert_not_called()


@override_settings(GEMINI_API_KEY="test-key")
class AdvisorApiTests(TestCase):
    def setUp(self):
        self.url = reverse("advisor_api")

    def post_json(self, body):
        return self.client.post(self.url, data=json.dumps(body), content_type="application/json")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_returns_response(self, post):
        post.return_value = fake_response(payload=gemini_payload("Hello student"))
        response = self.post_json({"userInput": "Hi", "conversationHistory": [{"role": "assistant", "content": "x"}]})
        self.assertEqual(response.status_code, 200)
        self.assertJSONEqual(response.content, {"response": "Hello student"})

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_rate_limit_and_payment_statuses(self, post):
        post.return_value = fake_response(429)
        response = self.post_json({"userInput": "Hi"})
        self.assertEqual(response.status_code, 429)
        self.assertEqual(response.json()["kind"], "rate_limited")

        post.return_value = fake_response(402)
        response = self.post_json({"userInput": "Hi"})
        self.assertEqual(response.status_code, 402)
        self.assertEqual(response.json()["kind"], "payment_required")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_other_failures_are_500(self, post):
        post.return_value = fake_response(400, text="bad")
        response = self.post_json({"userInput": "Hi"})
        self.assertEqual(response.status_code, 500)
        self.assertIn("error", response.json())

    def test_invalid_json_is_400(self):
        response = self.client.post(self.url, data="{nope", content_type="application/json")
        self.assertEqual(response.status_code, 400)

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_non_string_user_input_is_400(self, post):
        for value in (42, ["hi"], {"text": "hi"}, "   "):
            response = self.post_json({"userInput": value})
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["kind"], "bad_request")
        post.assert_not_called()

    def test_get_not_allowed(self):
        self.assertEqual(self.client.get(self.url).status_code, 405)


@override_settings(GEMINI_API_KEY="test-key")
class ChatViewTests(TestCase):
    def setUp(self):
        self.url = reverse("advisor_chat")

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_exchange_is_kept_in_session(self, post):
        post.return_value = fake_response(payload=gemini_payload("Have you tried accounting?"))
        response = self.client.post(self.url, {"message": "I like numbers"})
        self.assertRedirects(response, self.url)
        self.assertEqual(self.client.session[SESSION_KEY], [
            {"role": "user", "content": "I like numbers"},
            {"role": "assistant", "content": "Have you tried accounting?"},
        ])

        post.return_value = fake_response(payload=gemini_payload("Great."))
        self.client.post(self.url, {"message": "Tell me more"})
        sent = post.call_args.kwargs["json"]["contents"]
        self.assertEqual([c["role"] for c in sent], ["user", "user", "model", "user"])

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_rate_limit_flashes_message(self, post):
        post.return_value = fake_response(429)
        response = self.client.post(self.url, {"message": "Hello"}, follow=True)
        self.assertContains(response, "Rate limit exceeded")
        self.assertEqual(self.client.session.get(SESSION_KEY, []), [])

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_failed_turn_is_not_resent(self, post):
        post.return_value = fake_response(503, text="unavailable")
        self.client.post(self.url, {"message": "First try"})

        post.return_value = fake_response(payload=gemini_payload("Welcome back."))
        self.client.post(self.url, {"message": "Second try"})
        sent = post.call_args.kwargs["json"]["contents"]
        self.assertEqual([c["role"] for c in sent], ["user", "user"])
        self.assertEqual(sent[-1]["parts"][0]["text"], "Second try")
        self.assertEqual([turn["role"] for turn in self.client.session[SESSION_KEY]], ["user", "assistant"])

    def test_clear_conversation(self):
        session = self.client.session
        session[SESSION_KEY] = [{"role": "user", "content": "hi"}]
        session.save()
        response = self.client.post(reverse("advisor_clear"))
        self.assertRedirects(response, self.url)
        self.assertNotIn(SESSION_KEY, self.client.session)


@override_settings(GEMINI_API_KEY="test-key")
class CareerPlanViewTests(TestCase):
    def plan_form(self, **overrides):
        data = {
            "interests": ["Technology"],
            "custom_skills": "Excel, Writing",
            "industry": "Finance",
            "work_style": "Remote Work",
            "timeframe": "1-2 years",
            "plan_type": "Comprehensive (Both)",
            "goals": "Become an analyst",
        }
        data.update(overrides)
        return data

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_plan_is_generated_from_preferences(self, post):
        post.return_value = fake_response(payload=gemini_payload("## Your plan"))
        response = self.client.post(reverse("advisor_plan"), self.plan_form())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["plan"], "## Your plan")
        prompt = post.call_args.kwargs["json"]["contents"][1]["parts"][0]["text"]
        self.assertIn("Skills: Excel, Writing", prompt)
        self.assertIn("Goals: Become an analyst", prompt)

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_incomplete_preferences_do_not_call_upstream(self, post):
        response = self.client.post(reverse("advisor_plan"), self.plan_form(goals=""))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context["form"].errors)
        post.assert_not_called()

    @mock.patch("pathway_connect.advisor.client.requests.post")
    def test_summary(self, post):
        post.return_value = fake_response(payload=gemini_payload("Short summary"))
        response = self.client.post(reverse("advisor_summary"), {"plan": "Long plan"})
        self.assertEqual(response.context["summary"], "Short summary")
        prompt = post.call_args.kwargs["json"]["contents"][1]["parts"][0]["text"]
        self.assertIn("Long plan", prompt)


class ExportTests(TestCase):
    def test_text_exports_are_verbatim(self):
        plan = "# Plan\n\n- step one\n"
        for fmt, content_type in (("txt", "text/plain"), ("md", "text/markdown")):
            response = self.client.post(reverse("advisor_export", args=[fmt]), {"plan": plan})
            self.assertEqual(response.status_code, 200)
            self.assertTrue(response["Content-Type"].startswith(content_type))
            self.assertIn(f'filename="career-plan.{fmt}"', response["Content-Disposition"])
            self.assertEqual(response.content.decode("utf-8"), plan)

    def test_png_export(self):
        response = self.client.post(reverse("advisor_export", args=["png"]), {"plan": "Line one\nLine two"})
        self.assertEqual(response["Content-Type"], "image/png")
        self.assertTrue(response.content.startswith(b"\x89PNG"))

    def test_unknown_format_is_404(self):
        response = self.client.post(reverse("advisor_export", args=["pdf"]), {"plan": "x"})
        self.assertEqual(response.status_code, 404)

    def test_render_rejects_unknown_format(self):
        with self.assertRaises(ValueError):
            render_export("docx", "x")
