from locust import HttpUser, task, between
import random

WORDS = (
    "the quick brown fox jumps over a lazy dog while engineers weren't "
    "really sure whether the caching layer would reduce latency"
).split()


def generate_text():
    word_count = random.randint(20, 400)
    return " ".join(random.choice(WORDS) for _ in range(word_count))


class ReduceUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def reduce_text(self):
        self.client.post(
            "/api/reduce",
            json={
                "text": generate_text(),
                "options": {
                    "useStemming": random.random() < 0.5,
                    "stemmer": random.choice(["light", "extended", "aggressive"]),
                },
            },
        )

    @task
    def token_savings(self):
        text = generate_text()
        self.client.post(
            "/api/tokens/savings",
            json={"original": text, "compressed": text[: len(text) // 2]},
        )
