def format_file_document(doc):
    """Public fields of a file document; ``local_path`` is never exposed."""
    return {
        "id": doc["id"],
        "userId": doc["user_id"],
        "name": doc["name"],
        "type": doc["type"],
        "isPublic": bool(doc["is_public"]),
        "parentId": doc["parent_id"],
    }


def format_user_document(doc):
    return {"id": doc["id"], "email": doc["email"]}
