"""
API tests for the article endpoints.
"""
import pytest

IMG_URL = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"


class TestGetArticleById:
    """GET /api/articles/:article_id"""

    def test_article_fields(self, client):
        """Test that the stored article comes back field for field."""
        response = client.get("/api/articles/1")
        assert response.status_code == 200
        article = response.json()["article"]
        assert article["article_id"] == 1
        assert article["title"] == "Living in the shadow of a great man"
        assert article["topic"] == "mitch"
        assert article["author"] == "butter_bridge"
        assert article["body"] == "I find this existence challenging"
        assert article["created_at"] == "2020-07-09T20:11:00.000Z"
        assert article["votes"] == 100
        assert article["article_img_url"] == IMG_URL

    def test_includes_comment_count(self, client):
        assert client.get("/api/articles/1").json()["article"]["comment_count"] == 11
        assert client.get("/api/articles/2").json()["article"]["comment_count"] == 0

    @pytest.mark.parametrize("article_id", ["sushi-article", "1.5", "-1", "1e3", "1%0A"])
    def test_invalid_id(self, client, article_id):
        response = client.get(f"/api/articles/{article_id}")
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - article Id can only be a number"}

    @pytest.mark.parametrize("article_id", ["999", "99999999999"])
    def test_missing_article(self, client, article_id):
        response = client.get(f"/api/articles/{article_id}")
        assert response.status_code == 404
        assert response.json() == {"message": "article does not exist"}


class TestGetArticles:
    """GET /api/articles"""

    def test_lists_all_articles(self, client):
        response = client.get("/api/articles")
        assert response.status_code == 200
        articles = response.json()["articles"]
        assert len(articles) == 13
        for article in articles:
            assert isinstance(article["article_id"], int)
            assert isinstance(article["title"], str)
            assert isinstance(article["topic"], str)
            assert isinstance(article["author"], str)
            assert isinstance(article["created_at"], str)
            assert isinstance(article["votes"], int)
            assert isinstance(article["article_img_url"], str)
            assert float(article["comment_count"]) >= 0
            assert "body" not in article

    def test_sorted_most_recent_first(self, client):
        articles = client.get("/api/articles").json()["articles"]
        created = [article["created_at"] for article in articles]
        assert created == sorted(created, reverse=True)
        assert articles[0]["article_id"] == 3

    def test_comment_counts(self, client):
        articles = client.get("/api/articles").json()["articles"]
        counts = {article["article_id"]: article["comment_count"] for article in articles}
        assert counts[1] == 11
        assert counts[3] == 2
        assert counts[2] == 0

    def test_sort_by_votes_ascending(self, client):
        response = client.get("/api/articles", params={"sort_by": "votes", "order": "ASC"})
        assert response.status_code == 200
        votes = [article["votes"] for article in response.json()["articles"]]
        assert votes == sorted(votes)
        assert votes[-1] == 100

    def test_sort_by_comment_count(self, client):
        articles = client.get("/api/articles", params={"sort_by": "comment_count"}).json()["articles"]
        assert articles[0]["article_id"] == 1

    def test_invalid_sort_by(self, client):
        response = client.get("/api/articles", params={"sort_by": "body; DROP TABLE articles"})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - invalid sort_by query"}

    def test_invalid_order(self, client):
        response = client.get("/api/articles", params={"order": "sideways"})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - invalid order query"}

    def test_filter_by_topic(self, client):
        articles = client.get("/api/articles", params={"topic": "cats"}).json()["articles"]
        assert len(articles) == 1
        assert articles[0]["topic"] == "cats"

    def test_topic_without_articles(self, client):
        response = client.get("/api/articles", params={"topic": "paper"})
        assert response.status_code == 200
        assert response.json() == {"articles": []}

    def test_unknown_topic(self, client):
        response = client.get("/api/articles", params={"topic": "dogs"})
        assert response.status_code == 404
        assert response.json() == {"message": "topic does not exist"}


class TestPatchArticleVotes:
    """PATCH /api/articles/:article_id"""

    def test_increase_votes(self, client):
        response = client.patch("/api/articles/1", json={"inc_votes": 10})
        assert response.status_code == 200
        article = response.json()["article"]
        assert article["votes"] == 110
        assert article["article_id"] == 1
        assert article["title"] == "Living in the shadow of a great man"

    def test_decrease_votes(self, client):
        response = client.patch("/api/articles/1", json={"inc_votes": -10})
        assert response.status_code == 200
        assert response.json()["article"]["votes"] == 90

    def test_votes_can_go_negative(self, client):
        response = client.patch("/api/articles/2", json={"inc_votes": -5})
        assert response.status_code == 200
        assert response.json()["article"]["votes"] == -5

    def test_change_is_persisted(self, client):
        client.patch("/api/articles/1", json={"inc_votes": 1})
        assert client.get("/api/articles/1").json()["article"]["votes"] == 101

    def test_invalid_id(self, client):
        response = client.patch("/api/articles/ramen-article", json={"inc_votes": 5})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - article Id can only be a number"}

    def test_missing_article(self, client):
        response = client.patch("/api/articles/999", json={"inc_votes": 5})
        assert response.status_code == 404
        assert response.json() == {"message": "article does not exist"}

    def test_missing_inc_votes(self, client):
        response = client.patch("/api/articles/1", json={})
        assert response.status_code == 400
        assert response.json() == {"message": "missing inc_votes, unable to update votes"}

    def test_non_integer_inc_votes(self, client):
        response = client.patch("/api/articles/1", json={"inc_votes": "ten"})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - invalid request body"}

    @pytest.mark.parametrize("inc_votes", [10**20, 2**31, -2**31 - 1])
    def test_inc_votes_out_of_range(self, client, inc_votes):
        response = client.patch("/api/articles/1", json={"inc_votes": inc_votes})
        assert response.status_code == 400
        assert response.json() == {"message": "Bad request - invalid request body"}
        assert client.get("/api/articles/1").json()["article"]["votes"] == 100
