from graduates.services import NotificationsService

NOTIFICATION_FIELDS = "id userIdTo userIdFrom notificationType status seen userTo { email } userFrom { email }"


def create_request(graphql, to_id, from_id, kind="CV"):
    body = graphql(
        "mutation ($to: ID!, $from: ID!, $kind: String!) {"
        " createRequestNotification(userIdTo: $to, userIdFrom: $from, notificationType: $kind) { %s } }"
        % NOTIFICATION_FIELDS,
        {"to": to_id, "from": from_id, "kind": kind},
    )
    return body["data"]["createRequestNotification"]


def test_create_and_read_back(graphql, users):
    alice, bob = users

    created = create_request(graphql, bob.id, alice.id)

    assert created["status"] == "Pending"
    assert created["seen"] is False
    assert created["userTo"] == {"email": "bob@example.com"}
    assert created["userFrom"] == {"email": "alice@example.com"}

    fetched = graphql("query ($id: ID!) { getNotificationById(id: $id) { id } }", {"id": created["id"]})
    assert fetched["data"]["getNotificationById"] == {"id": created["id"]}


def test_list_queries(graphql, users):
    alice, bob = users
    create_request(graphql, bob.id, alice.id, "CV")
    create_request(graphql, bob.id, alice.id, "AcademicRecord")

    body = graphql(
        "query ($a: ID!, $b: ID!) {"
        " all: getAllNotifications { id }"
        " received: getNotificationsReceived(userId: $b) { id }"
        " sent: getNotificationsSent(userId: $a) { id }"
        " none: getNotificationsReceived(userId: $a) { id }"
        " cv: getNotificationsByType(userId: $b, notificationType: \"CV\") { notificationType }"
        " }",
        {"a": alice.id, "b": bob.id},
    )

    data = body["data"]
    assert len(data["all"]) == 2
    assert len(data["received"]) == 2
    assert len(data["sent"]) == 2
    assert data["none"] == []
    assert data["cv"] == [{"notificationType": "CV"}]


def test_update_status_and_seen(graphql, users):
    alice, bob = users
    created = create_request(graphql, bob.id, alice.id)

    status = graphql(
        "mutation ($id: ID!) { updateRequestNotification(id: $id, status: \"Accepted\") { status } }",
        {"id": created["id"]},
    )
    seen = graphql("mutation ($id: ID!) { updateSeen(id: $id, seen: true) { seen } }", {"id": created["id"]})

    assert status["data"]["updateRequestNotification"] == {"status": "Accepted"}
    assert seen["data"]["updateSeen"] == {"seen": True}
    assert NotificationsService.get_notification_by_id(created["id"]).status == "Accepted"


def test_missing_notification_is_not_found(graphql, app):
    body = graphql('mutation { updateSeen(id: "missing", seen: true) { id } }')
    lookup = graphql('{ getNotificationById(id: "missing") { id } }')

    assert body["errors"][0]["message"] == "Notification not found"
    assert lookup["errors"][0]["message"] == "Notification not found"


def test_get_user_object(graphql, users):
    alice, _ = users

    body = graphql("query ($id: ID!) { getUserObject(userId: $id) { id email username } }", {"id": alice.id})
    missing = graphql('{ getUserObject(userId: "ghost") { id } }')

    assert body["data"]["getUserObject"] == {"id": alice.id, "email": "alice@example.com", "username": "alice"}
    assert missing["errors"][0]["message"] == "User not found"


def test_request_mutations_send_mail(graphql, outbox):
    body = graphql(
        "mutation {"
        ' cv: requestCV(userEmailFrom: "hr@example.com", userEmailTo: "grad@example.com")'
        ' contact: requestContactDetails(userEmailFrom: "hr@example.com", userEmailTo: "grad@example.com")'
        ' record: requestAcademicRecord(userEmailFrom: "hr@example.com", userEmailTo: "grad@example.com")'
        " }"
    )

    assert body["data"] == {"cv": True, "contact": True, "record": True}
    assert [msg.subject for msg in outbox] == [
        "Graduates: Request for your CV",
        "Graduates: Request for your Contact details",
        "Graduates: Request for your Academic Record",
    ]


def test_send_mail_mutation(graphql, outbox):
    body = graphql(
        'mutation { sendMail(emailFrom: "a@example.com", emailTo: "b@example.com", subject: "Hi", text: "Body") }'
    )

    assert body["data"]["sendMail"] is True
    assert outbox[0].recipients == ["b@example.com"]
    assert outbox[0].body == "Body"
