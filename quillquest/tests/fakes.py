STUB_IMAGE_URL = "https://images.example/stub.png"


class FakeVenice:
    """Stands in for VeniceClient. Records every call and replays canned answers."""

    def __init__(self):
        self.text_response = ""
        self.image_response = STUB_IMAGE_URL
        self.text_error = None
        self.image_error = None
        self.text_calls = []
        self.image_calls = []

    def generate_text(self, prompt, max_tokens=500, temperature=0.8):
        self.text_calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        if self.text_error:
            raise self.text_error
        return self.text_response

    def generate_image(self, prompt, style="realistic", width=1024, height=1024):
        self.image_calls.append({"prompt": prompt, "style": style, "width": width, "height": height})
        if self.image_error:
            raise self.image_error
        return self.image_response

    @property
    def call_count(self):
        return len(self.text_calls) + len(self.image_calls)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload
