"""RabbitMQ adapter – publisher, competing consumer and dead-letter sink (aio-pika)."""
from adoptflow.adapters.rabbitmq.bus import RabbitMQMessageBus
from adoptflow.adapters.rabbitmq.consumer import RabbitMQConsumer
from adoptflow.adapters.rabbitmq.dead_letter import RabbitMQDeadLetterSink

__all__ = ["RabbitMQConsumer", "RabbitMQDeadLetterSink", "RabbitMQMessageBus"]
