from locust import HttpUser, task, between

FORM_URLS = ("/forms/item-issue/", "/forms/lab-issue/")


class IssueFormUser(HttpUser):
    """
    Нагрузочный сценарий: открытие форм и редактирование строк.
    Кнопку Submit не нажимаем, чтобы не писать мусор в таблицу.
    """
    wait_time = between(1, 3)

    def _post(self, url, data):
        # CSRF-токен берем из куки, выставленной при GET
        csrftoken = self.client.cookies.get('csrftoken')
        data = dict(data, csrfmiddlewaretoken=csrftoken)
        return self.client.post(url, data, headers={"Referer": f"{self.host}{url}"})

    @task(3)
    def open_forms(self):
        for url in FORM_URLS:
            self.client.get(url)

    @task(2)
    def edit_item_rows(self):
        url = "/forms/lab-issue/"
        self.client.get(url)
        self._post(url, {
            "action": "add_item",
            "user_type": "student",
            "name": "Load Test",
            "items-0-name": "Multimeter",
            "items-0-quantity": "1",
        })
        self._post(url, {"action": "remove_item:1"})

    @task(1)
    def switch_department(self):
        url = "/forms/item-issue/"
        self.client.get(url)
        self._post(url, {"action": "refresh", "department": "Others", "other_department": "Design"})
        self._post(url, {"action": "refresh", "department": "Physics"})
